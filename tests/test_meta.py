import os

import pytest

from kubitect.context import AppContext
from kubitect.meta import ClusterMeta


@pytest.fixture
def ctx(tmp_path):
    wd = tmp_path / "wd"
    home = tmp_path / "home" / ".kubitect"
    return AppContext(working_dir=str(wd), home_dir=str(home))


@pytest.fixture
def cluster(ctx):
    name = "cls"
    return ClusterMeta(
        context=ctx, name=name, path=os.path.join(ctx.clusters_dir(), name)
    )


def test_config_dir(cluster):
    assert cluster.config_dir() == os.path.join(cluster.path, "config")


def test_file_paths(cluster):
    cfg = cluster.config_dir()
    assert cluster.applied_config_path() == os.path.join(cfg, "kubitect-applied.yaml")
    assert cluster.infrastructure_config_path() == os.path.join(
        cfg, "infrastructure.yaml"
    )
    assert cluster.kubeconfig_path() == os.path.join(cfg, "admin.conf")
    assert cluster.private_ssh_key_path() == os.path.join(cfg, ".ssh", "id_rsa")
    assert cluster.tf_state_path() == os.path.join(
        cluster.path, "config", "terraform", "terraform.tfstate"
    )


def test_cache_dir_global(ctx, cluster):
    assert cluster.cache_dir() == os.path.join(ctx.home_dir, "cache", cluster.name)


def test_cache_dir_local(ctx):
    c = ClusterMeta(context=ctx, name="local-cls", path="unused", local=True)
    assert c.cache_dir() == os.path.join(
        ctx.working_dir, ".kubitect", "cache", "local-cls"
    )


def test_contains_files(cluster):
    assert cluster.contains_applied_config() is False
    assert cluster.contains_tf_state_config() is False
    assert cluster.contains_kubeconfig() is False

    for p in (
        cluster.applied_config_path(),
        cluster.tf_state_path(),
        cluster.kubeconfig_path(),
    ):
        os.makedirs(os.path.dirname(p), exist_ok=True)
        with open(p, "w") as f:
            f.write("")

    assert cluster.contains_applied_config() is True
    assert cluster.contains_tf_state_config() is True
    assert cluster.contains_kubeconfig() is True