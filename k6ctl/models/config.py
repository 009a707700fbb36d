"""Configuration data models"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any

from ..constants import (
    DEFAULT_NAMESPACE,
    DEFAULT_PARALLELISM,
    DEFAULT_RUNNER_IMAGE,
    DEFAULT_TREND_STATS,
)


@dataclass
class ResourceQuantity:
    """CPU and memory quantities in Kubernetes notation"""

    cpu: str
    memory: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {"cpu": self.cpu, "memory": self.memory}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ResourceQuantity':
        """Create from dictionary"""
        return cls(cpu=data["cpu"], memory=data["memory"])


@dataclass
class ResourcesConfig:
    """Runner pod resource limits and requests"""

    limits: ResourceQuantity
    requests: ResourceQuantity

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "limits": self.limits.to_dict(),
            "requests": self.requests.to_dict()
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ResourcesConfig':
        """Create from dictionary"""
        return cls(
            limits=ResourceQuantity.from_dict(data["limits"]),
            requests=ResourceQuantity.from_dict(data["requests"])
        )


@dataclass
class RunnerConfig:
    """Runner pod configuration"""

    image: str = DEFAULT_RUNNER_IMAGE
    resources: Optional[ResourcesConfig] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {"image": self.image}
        if self.resources:
            data["resources"] = self.resources.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RunnerConfig':
        """Create from dictionary"""
        resources = data.get("resources")
        return cls(
            image=data.get("image", DEFAULT_RUNNER_IMAGE),
            resources=ResourcesConfig.from_dict(resources) if resources else None
        )


@dataclass
class PrometheusConfig:
    """Prometheus remote-write output configuration"""

    server_url: str
    trend_stats: List[str] = field(default_factory=lambda: list(DEFAULT_TREND_STATS))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "serverUrl": self.server_url,
            "trendStats": self.trend_stats
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PrometheusConfig':
        """Create from dictionary"""
        return cls(
            server_url=data["serverUrl"],
            trend_stats=data.get("trendStats", list(DEFAULT_TREND_STATS))
        )


@dataclass
class K6Config:
    """Complete k6ctl configuration"""

    namespace: str = DEFAULT_NAMESPACE
    parallelism: int = DEFAULT_PARALLELISM
    arguments: Optional[List[str]] = None
    cleanup: bool = True
    quiet: bool = True
    separate: bool = False
    runner: RunnerConfig = field(default_factory=RunnerConfig)
    prometheus: Optional[PrometheusConfig] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'K6Config':
        """Create from dictionary, filling in defaults"""
        prometheus = data.get("prometheus")
        return cls(
            namespace=data.get("namespace", DEFAULT_NAMESPACE),
            parallelism=data.get("parallelism", DEFAULT_PARALLELISM),
            arguments=data.get("arguments"),
            cleanup=data.get("cleanup", True),
            quiet=data.get("quiet", True),
            separate=data.get("separate", False),
            runner=RunnerConfig.from_dict(data.get("runner", {})),
            prometheus=PrometheusConfig.from_dict(prometheus) if prometheus else None
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            "namespace": self.namespace,
            "parallelism": self.parallelism,
            "cleanup": self.cleanup,
            "quiet": self.quiet,
            "separate": self.separate,
            "runner": self.runner.to_dict()
        }
        if self.arguments is not None:
            data["arguments"] = self.arguments
        if self.prometheus:
            data["prometheus"] = self.prometheus.to_dict()
        return data
