"""Application context: where clusters and shared files live."""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass, field

from kubitect import env

DEFAULT_HOME_DIR = ".kubitect"
DEFAULT_SHARE_DIR = "share"
DEFAULT_CLUSTERS_DIR = "clusters"


def app_exists(cmd: str) -> bool:
    """Return True if a command with the given name is found on PATH."""
    return shutil.which(cmd) is not None


@dataclass(frozen=True)
class AppContext:
    """Directories and flags that every cluster action works with."""

    working_dir: str
    home_dir: str
    local: bool = False
    show_terraform_plan: bool = False

    def share_dir(self) -> str:
        """Directory of binaries shared by all clusters."""
        return os.path.join(self.home_dir, DEFAULT_SHARE_DIR)

    def clusters_dir(self) -> str:
        """Directory in which clusters are created."""
        return os.path.join(self.home_dir, DEFAULT_CLUSTERS_DIR)

    def local_clusters_dir(self) -> str:
        """Directory in which local clusters are created."""
        return os.path.join(self.working_dir, DEFAULT_HOME_DIR, DEFAULT_CLUSTERS_DIR)

    def verify_requirements(self) -> None:
        """Raise RuntimeError if any required application is missing from PATH."""
        missing = [app for app in env.PROJECT_REQUIRED_APPS if not app_exists(app)]
        if missing:
            raise RuntimeError(f"Some requirements are not met: [{' '.join(missing)}]")


@dataclass
class AppContextOptions:
    """Options given on the command line that shape the application context."""

    auto_approve: bool = False
    debug: bool = False
    no_color: bool = False
    local: bool = False
    show_terraform_plan: bool = False
    _context: AppContext | None = field(
        default=None, init=False, repr=False, compare=False
    )

    def app_context(self) -> AppContext:
        """Build the application context, or return the one built before."""
        if self._context is None:
            wd = os.getcwd()
            base = wd if self.local else os.path.expanduser("~")
            self._context = AppContext(
                working_dir=wd,
                home_dir=os.path.join(base, DEFAULT_HOME_DIR),
                local=self.local,
                show_terraform_plan=self.show_terraform_plan,
            )
        return self._context