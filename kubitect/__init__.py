"""Cluster directory bookkeeping and configuration change rules for Kubernetes clusters."""

__version__ = "3.5.0"