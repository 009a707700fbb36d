"""Cluster API backends for k6ctl"""

from .base import ClusterClient, ClusterClientError, NotFoundError, AlreadyExistsError
from .k8s import KubernetesClusterClient

__all__ = [
    "ClusterClient",
    "ClusterClientError",
    "NotFoundError",
    "AlreadyExistsError",
    "KubernetesClusterClient",
]
