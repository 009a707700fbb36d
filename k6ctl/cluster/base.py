# k6ctl/cluster/base.py
"""Cluster client abstract base class"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional


class ClusterClientError(Exception):
    """Cluster API call failed"""

    def __init__(self, message: str, status: Optional[int] = None, reason: Optional[str] = None):
        super().__init__(message)
        self.status = status
        self.reason = reason


class NotFoundError(ClusterClientError):
    """Requested object does not exist"""

    def __init__(self, message: str, reason: Optional[str] = "Not Found"):
        super().__init__(message, status=404, reason=reason)


class AlreadyExistsError(ClusterClientError):
    """Object with the same name already exists"""

    def __init__(self, message: str, reason: Optional[str] = "Conflict"):
        super().__init__(message, status=409, reason=reason)


class ClusterClient(ABC):
    """Minimal ConfigMap capability of a cluster API"""

    @abstractmethod
    async def create_config_map(self, namespace: str, body: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a ConfigMap

        Args:
            namespace: Target namespace
            body: ConfigMap manifest

        Returns:
            The created object as acknowledged by the cluster

        Raises:
            ClusterClientError: If the cluster did not acknowledge creation
        """
        pass

    @abstractmethod
    async def delete_config_map(self, name: str, namespace: str) -> None:
        """
        Delete a ConfigMap

        Raises:
            ClusterClientError: If the delete request failed
        """
        pass

    @abstractmethod
    async def read_config_map(self, name: str, namespace: str) -> Dict[str, Any]:
        """
        Read a ConfigMap

        Raises:
            NotFoundError: If the ConfigMap does not exist
            ClusterClientError: On any other failure
        """
        pass
