import os

import pytest

from kubitect import env
from kubitect.context import AppContext, AppContextOptions, app_exists


@pytest.fixture
def fake_path(tmp_path, monkeypatch):
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    for app in ("virtualenv", "python3", "git"):
        exe = bin_dir / app
        exe.write_text("#!/bin/sh\nexit 0\n")
        exe.chmod(0o755)
    monkeypatch.setenv("PATH", str(bin_dir))
    return bin_dir


def test_new_app_context(tmp_path, monkeypatch):
    wd = tmp_path / "wd"
    home = tmp_path / "home"
    wd.mkdir()
    home.mkdir()
    monkeypatch.chdir(wd)
    monkeypatch.setenv("HOME", str(home))

    cwd = os.getcwd()
    ctx = AppContextOptions().app_context()
    assert ctx.working_dir == cwd
    assert ctx.home_dir == os.path.join(str(home), ".kubitect")
    assert ctx.share_dir() == os.path.join(str(home), ".kubitect", "share")
    assert ctx.clusters_dir() == os.path.join(str(home), ".kubitect", "clusters")
    assert ctx.local_clusters_dir() == os.path.join(cwd, ".kubitect", "clusters")
    assert ctx.local is False
    assert ctx.show_terraform_plan is False


def test_local_app_context_uses_working_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cwd = os.getcwd()
    ctx = AppContextOptions(local=True).app_context()
    assert ctx.local is True
    assert ctx.home_dir == os.path.join(cwd, ".kubitect")
    assert ctx.clusters_dir() == ctx.local_clusters_dir()


def test_app_context_is_cached(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    opts = AppContextOptions(show_terraform_plan=True)
    first = opts.app_context()
    assert opts.app_context() is first
    assert first.show_terraform_plan is True


def test_app_exists(fake_path):
    assert app_exists("git") is True
    assert app_exists("invalid-app") is False


def test_verify_requirements_missing(fake_path, monkeypatch):
    monkeypatch.setattr(
        env, "PROJECT_REQUIRED_APPS", [*env.PROJECT_REQUIRED_APPS, "invalid-app"]
    )
    ctx = AppContext(working_dir="wd", home_dir="home")
    with pytest.raises(RuntimeError) as exc:
        ctx.verify_requirements()
    assert str(exc.value) == "Some requirements are not met: [invalid-app]"


def test_verify_requirements_all_missing(tmp_path, monkeypatch):
    empty = tmp_path / "empty"
    empty.mkdir()
    monkeypatch.setenv("PATH", str(empty))
    ctx = AppContext(working_dir="wd", home_dir="home")
    with pytest.raises(RuntimeError) as exc:
        ctx.verify_requirements()
    assert str(exc.value) == "Some requirements are not met: [virtualenv python3 git]"