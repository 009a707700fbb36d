"""Kubernetes cluster client backed by the official Python client"""

import asyncio
import logging
from typing import Dict, Any, Optional, Callable

import urllib3
from kubernetes import client, config
from kubernetes.client.rest import ApiException

from .base import ClusterClient, ClusterClientError, NotFoundError, AlreadyExistsError

logger = logging.getLogger(__name__)


def _translate(e: ApiException, action: str) -> ClusterClientError:
    """Map an ApiException onto the cluster error hierarchy"""
    message = f"{action}: ({e.status}) Reason: {e.reason}"
    if e.body:
        message += f"\n{e.body}"

    if e.status == 404:
        return NotFoundError(message, reason=e.reason)
    if e.status == 409:
        return AlreadyExistsError(message, reason=e.reason)
    return ClusterClientError(message, status=e.status, reason=e.reason)


class KubernetesClusterClient(ClusterClient):
    """ConfigMap operations through ``CoreV1Api``

    The client library is synchronous; calls run in a worker thread.
    """

    def __init__(self, core_v1: client.CoreV1Api):
        self._core_v1 = core_v1

    @classmethod
    def from_default(cls,
                     kubeconfig: Optional[str] = None,
                     context: Optional[str] = None) -> "KubernetesClusterClient":
        """
        Create a client from ambient cluster credentials

        Tries the kubeconfig file first (``kubeconfig`` or the default
        location) and falls back to in-cluster service account config.

        Raises:
            ClusterClientError: If no configuration could be loaded
        """
        try:
            config.load_kube_config(config_file=kubeconfig, context=context)
            logger.debug("Loaded kubeconfig")
        except config.ConfigException as kube_error:
            if kubeconfig or context:
                raise ClusterClientError(
                    f"Failed to load Kubernetes configuration: {kube_error}"
                ) from kube_error
            try:
                config.load_incluster_config()
                logger.debug("Using in-cluster Kubernetes configuration")
            except config.ConfigException as e:
                raise ClusterClientError(
                    f"Failed to load Kubernetes configuration: {kube_error}; {e}"
                ) from e

        return cls(client.CoreV1Api())

    async def _call(self, action: str, func: Callable, **kwargs) -> Any:
        """Run a blocking API call in a thread, translating failures"""
        try:
            return await asyncio.to_thread(func, **kwargs)
        except ApiException as e:
            raise _translate(e, action) from e
        except urllib3.exceptions.HTTPError as e:
            raise ClusterClientError(f"{action}: {e}") from e

    async def create_config_map(self, namespace: str, body: Dict[str, Any]) -> Dict[str, Any]:
        name = body.get("metadata", {}).get("name")
        created = await self._call(
            f"Failed to create ConfigMap {name}",
            self._core_v1.create_namespaced_config_map,
            namespace=namespace,
            body=body
        )
        logger.debug(f"ConfigMap {name} acknowledged in namespace {namespace}")
        return self._core_v1.api_client.sanitize_for_serialization(created)

    async def delete_config_map(self, name: str, namespace: str) -> None:
        await self._call(
            f"Failed to delete ConfigMap {name}",
            self._core_v1.delete_namespaced_config_map,
            name=name,
            namespace=namespace
        )

    async def read_config_map(self, name: str, namespace: str) -> Dict[str, Any]:
        config_map = await self._call(
            f"Failed to read ConfigMap {name}",
            self._core_v1.read_namespaced_config_map,
            name=name,
            namespace=namespace
        )
        return self._core_v1.api_client.sanitize_for_serialization(config_map)
