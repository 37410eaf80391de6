"""Discovery of clusters in the global and local cluster directories."""

from __future__ import annotations

import os

from kubitect.context import AppContext
from kubitect.meta import ClusterMeta


class MetaClusters(list):
    """A list of cluster metadata with lookups by name."""

    def names(self) -> list[str]:
        return [c.name for c in self]

    def find_by_name(self, name: str) -> ClusterMeta | None:
        return next((c for c in self if c.name == name), None)

    def count_by_name(self, name: str) -> int:
        return sum(1 for c in self if c.name == name)


def _clusters(ctx: AppContext, local: bool) -> MetaClusters:
    if local:
        # Local clusters are ignored when both directories are the same.
        if ctx.local_clusters_dir() == ctx.clusters_dir():
            return MetaClusters()
        path = ctx.local_clusters_dir()
    else:
        path = ctx.clusters_dir()

    try:
        entries = sorted(os.scandir(path), key=lambda e: e.name)
    except OSError as exc:
        raise OSError(f"failed to read clusters directory: {exc}") from exc

    return MetaClusters(
        ClusterMeta(
            context=ctx,
            name=entry.name,
            path=os.path.join(path, entry.name),
            local=local,
        )
        for entry in entries
        if entry.is_dir(follow_symlinks=False)
    )


def all_clusters(ctx: AppContext) -> MetaClusters:
    """Return clusters from the global directory and, if present, the local one."""
    found = _clusters(ctx, local=False)
    try:
        found.extend(_clusters(ctx, local=True))
    except OSError:
        pass
    return found