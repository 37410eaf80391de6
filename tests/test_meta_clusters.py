import os

import pytest

from kubitect.context import AppContext
from kubitect.meta import ClusterMeta
from kubitect.meta_clusters import MetaClusters, all_clusters


@pytest.fixture
def ctx(tmp_path):
    return AppContext(
        working_dir=str(tmp_path / "wd"),
        home_dir=str(tmp_path / "home" / ".kubitect"),
    )


def mock_meta_clusters(ctx, names):
    clusters = MetaClusters()
    for name in names:
        is_local = name.startswith("local")
        base = ctx.local_clusters_dir() if is_local else ctx.clusters_dir()
        path = os.path.join(base, name)
        os.makedirs(path, exist_ok=True)
        clusters.append(ClusterMeta(context=ctx, name=name, path=path, local=is_local))
    return clusters


def test_names(ctx):
    names = ["mock-cluster-1", "mock-cluster-1", "local-cluster-3"]
    mcs = mock_meta_clusters(ctx, names)
    assert sorted(mcs.names()) == sorted(names)


def test_count_by_name(ctx):
    names = ["mock-cluster-1", "mock-cluster-1", "local-cluster-3"]
    mcs = mock_meta_clusters(ctx, names)
    assert mcs.count_by_name("mock-cluster-0") == 0
    assert mcs.count_by_name("mock-cluster-1") == 2


def test_find_by_name(ctx):
    mcs = mock_meta_clusters(ctx, ["mock-cluster"])
    c = mcs.find_by_name("mock-cluster")
    assert c is not None
    assert c.name == "mock-cluster"
    assert mcs.find_by_name("invalid") is None


def test_all_clusters(ctx):
    mcs = mock_meta_clusters(ctx, ["mock-cluster", "local-cluster"])
    cs = all_clusters(mcs[0].context)
    assert len(cs) == 2
    assert cs.find_by_name("local-cluster").local is True
    assert cs.find_by_name("mock-cluster").local is False


def test_all_clusters_ignores_files(ctx):
    mock_meta_clusters(ctx, ["mock-cluster"])
    with open(os.path.join(ctx.clusters_dir(), "not-a-cluster"), "w") as f:
        f.write("x")
    assert all_clusters(ctx).names() == ["mock-cluster"]


def test_all_clusters_same_local_dir(tmp_path):
    wd = tmp_path / "wd"
    ctx = AppContext(working_dir=str(wd), home_dir=str(wd / ".kubitect"), local=True)
    mock_meta_clusters(ctx, ["local-cls"])
    cs = all_clusters(ctx)
    assert cs.names() == ["local-cls"]


def test_all_clusters_invalid_clusters_dir(ctx):
    with pytest.raises(OSError, match="failed to read clusters directory"):
        all_clusters(ctx)