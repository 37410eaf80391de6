"""Cluster metadata: the paths of a cluster's files."""

from __future__ import annotations

import os
from dataclasses import dataclass

from kubitect.context import AppContext

DEFAULT_CONFIG_DIR = "config"
DEFAULT_CACHE_DIR = "cache"
DEFAULT_TERRAFORM_DIR = os.path.join(DEFAULT_CONFIG_DIR, "terraform")

DEFAULT_NEW_CONFIG_FILENAME = "kubitect.yaml"
DEFAULT_APPLIED_CONFIG_FILENAME = "kubitect-applied.yaml"
DEFAULT_INFRA_CONFIG_FILENAME = "infrastructure.yaml"

DEFAULT_TERRAFORM_STATE_FILENAME = "terraform.tfstate"
DEFAULT_KUBECONFIG_FILENAME = "admin.conf"


@dataclass
class ClusterMeta:
    """A cluster's name and location, with the paths derived from them."""

    context: AppContext
    name: str
    path: str
    local: bool = False

    def config_dir(self) -> str:
        return os.path.join(self.path, DEFAULT_CONFIG_DIR)

    def cache_dir(self) -> str:
        clusters_dir = (
            self.context.local_clusters_dir()
            if self.local
            else self.context.clusters_dir()
        )
        return os.path.normpath(
            os.path.join(clusters_dir, "..", DEFAULT_CACHE_DIR, self.name)
        )

    def applied_config_path(self) -> str:
        return os.path.join(self.config_dir(), DEFAULT_APPLIED_CONFIG_FILENAME)

    def infrastructure_config_path(self) -> str:
        return os.path.join(self.config_dir(), DEFAULT_INFRA_CONFIG_FILENAME)

    def tf_state_path(self) -> str:
        return os.path.join(
            self.path, DEFAULT_TERRAFORM_DIR, DEFAULT_TERRAFORM_STATE_FILENAME
        )

    def kubeconfig_path(self) -> str:
        return os.path.join(self.config_dir(), DEFAULT_KUBECONFIG_FILENAME)

    def private_ssh_key_path(self) -> str:
        return os.path.join(self.config_dir(), ".ssh", "id_rsa")

    def contains_applied_config(self) -> bool:
        return os.path.exists(self.applied_config_path())

    def contains_tf_state_config(self) -> bool:
        return os.path.exists(self.tf_state_path())

    def contains_kubeconfig(self) -> bool:
        return os.path.exists(self.kubeconfig_path())