"""Publisher API for ConfigMap publishing operations"""

import base64
import logging
from pathlib import Path
from typing import Dict, Optional, Any

import aiofiles

from ..cluster import ClusterClient, ClusterClientError, NotFoundError, KubernetesClusterClient
from ..constants import CONFIGMAP_API_VERSION, CONFIGMAP_KIND, MAX_CONFIGMAP_PAYLOAD_SIZE
from ..core.naming import config_map_name_for, is_valid_resource_name
from ..models import ArchiveResult, ConfigMapResult
from .exceptions import (
    PublishError,
    ArchiveNotFoundError,
    ArchiveTooLargeError,
    PublishFailedError,
    RetractFailedError,
)

logger = logging.getLogger(__name__)


def build_config_map(name: str,
                     namespace: str,
                     filename: str,
                     payload: str) -> Dict[str, Any]:
    """
    Build a ConfigMap manifest holding one binary file

    Args:
        name: ConfigMap name
        namespace: Target namespace
        filename: Key of the single ``binaryData`` entry
        payload: Base64 encoded file content

    Returns:
        ConfigMap manifest
    """
    return {
        "apiVersion": CONFIGMAP_API_VERSION,
        "kind": CONFIGMAP_KIND,
        "metadata": {
            "name": name,
            "namespace": namespace,
        },
        "binaryData": {
            filename: payload,
        },
    }


class Publisher:
    """Publisher class for storing archives as ConfigMaps"""

    def __init__(self, cluster_client: ClusterClient):
        """
        Initialize publisher

        Args:
            cluster_client: Cluster API used for create/delete calls
        """
        self.cluster_client = cluster_client

    async def publish(self,
                      archive_result: ArchiveResult,
                      namespace: str) -> ConfigMapResult:
        """
        Publish an archive as a ConfigMap

        Args:
            archive_result: Result of a previous archive call
            namespace: Target namespace

        Returns:
            ConfigMapResult: Reference to the created ConfigMap

        Raises:
            ArchiveNotFoundError: If the archive file no longer exists
            ArchiveTooLargeError: If the archive exceeds the payload ceiling
            PublishFailedError: If the cluster did not acknowledge creation
        """
        archive_path = Path(archive_result.archive_path)
        if not archive_path.is_file():
            raise ArchiveNotFoundError(archive_result.archive_path)

        size = archive_path.stat().st_size
        if size > MAX_CONFIGMAP_PAYLOAD_SIZE:
            raise ArchiveTooLargeError(archive_result.archive_path, size)

        config_map_name = config_map_name_for(archive_result.archive_filename)
        if not is_valid_resource_name(config_map_name):
            raise PublishFailedError(
                config_map_name,
                namespace,
                f"'{config_map_name}' derived from {archive_result.archive_filename} "
                "is not a valid resource name"
            )

        try:
            async with aiofiles.open(archive_path, 'rb') as f:
                content = await f.read()
        except FileNotFoundError as e:
            raise ArchiveNotFoundError(archive_result.archive_path) from e

        body = build_config_map(
            config_map_name,
            namespace,
            archive_result.archive_filename,
            base64.b64encode(content).decode('ascii')
        )

        try:
            await self.cluster_client.create_config_map(namespace, body)
        except ClusterClientError as e:
            raise PublishFailedError(config_map_name, namespace, str(e)) from e

        logger.debug(f"ConfigMap {config_map_name} created in namespace {namespace}")

        return ConfigMapResult(
            namespace=namespace,
            config_map_name=config_map_name,
            archive_path=archive_result.archive_path
        )

    async def retract(self, config_map_name: str, namespace: str) -> None:
        """
        Delete a published ConfigMap

        Args:
            config_map_name: ConfigMap name
            namespace: Namespace it lives in

        Raises:
            RetractFailedError: If the delete request failed
        """
        try:
            await self.cluster_client.delete_config_map(config_map_name, namespace)
        except ClusterClientError as e:
            raise RetractFailedError(config_map_name, namespace, str(e)) from e

        logger.debug(f"ConfigMap {config_map_name} deleted from namespace {namespace}")

    async def exists(self, config_map_name: str, namespace: str) -> bool:
        """
        Check whether a ConfigMap exists

        Raises:
            PublishError: If the cluster could not be queried
        """
        try:
            await self.cluster_client.read_config_map(config_map_name, namespace)
        except NotFoundError:
            return False
        except ClusterClientError as e:
            raise PublishError(str(e)) from e
        return True


def _default_publisher(cluster_client: Optional[ClusterClient]) -> Publisher:
    if cluster_client is None:
        try:
            cluster_client = KubernetesClusterClient.from_default()
        except ClusterClientError as e:
            raise PublishError(str(e)) from e
    return Publisher(cluster_client)


# Convenience functions
async def publish(archive_result: ArchiveResult,
                  namespace: str,
                  cluster_client: Optional[ClusterClient] = None) -> ConfigMapResult:
    """
    Publish an archive (convenience function)

    Args:
        archive_result: Result of a previous archive call
        namespace: Target namespace
        cluster_client: Cluster client, built from kubeconfig if omitted

    Returns:
        ConfigMapResult: Publishing result
    """
    return await _default_publisher(cluster_client).publish(archive_result, namespace)


async def retract(config_map_name: str,
                  namespace: str,
                  cluster_client: Optional[ClusterClient] = None) -> None:
    """Delete a published ConfigMap (convenience function)"""
    await _default_publisher(cluster_client).retract(config_map_name, namespace)
