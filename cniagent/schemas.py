"""Metadata snapshot schemas.

These Pydantic models mirror the objects served by the cluster metadata
service (hosts, networks, services and their containers). Field names match
the snake_case keys of the metadata JSON; unknown keys are ignored.
"""

from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, Field

from cniagent.config import settings


# A CNI configuration tree: nested string-keyed mappings with arbitrary leaves.
# Only mappings and string leaves are ever rewritten.
ConfigMapping = dict[str, "ConfigNode"]
ConfigNode = Union[ConfigMapping, str, int, float, bool, list, None]


class ContainerState(str, Enum):
    """Container lifecycle state as reported by metadata."""
    RUNNING = "running"
    STARTING = "starting"
    STOPPING = "stopping"
    STOPPED = "stopped"
    REMOVED = "removed"


class Host(BaseModel):
    """The host this agent runs on."""
    uuid: str = ""
    environment_uuid: str = ""
    name: str = ""
    hostname: str = ""
    agent_ip: str = ""
    labels: dict[str, str] = Field(default_factory=dict)


class Container(BaseModel):
    """A service container instance."""
    uuid: str = ""
    name: str = ""
    host_uuid: str = ""
    network_uuid: str = ""
    # Kept as a plain string: metadata may report states we do not enumerate
    state: str = ""
    primary_ip: str = ""


class Service(BaseModel):
    """A service within a stack.

    A default-constructed Service stands for "no service found" and has no
    containers.
    """
    uuid: str = ""
    stack_uuid: str = ""
    stack_name: str = ""
    kind: str = ""
    name: str = ""
    primary_service_name: str = ""
    containers: list[Container] = Field(default_factory=list)


class Network(BaseModel):
    """An overlay network definition."""
    uuid: str = ""
    environment_uuid: str = ""
    name: str = ""
    metadata: dict[str, Any] = Field(default_factory=dict)

    def cni_config(self) -> dict[str, Any] | None:
        """Return the CNI config files keyed by file name, or None if absent/invalid."""
        conf = self.metadata.get(settings.cni_config_key)
        if isinstance(conf, dict):
            return conf
        return None
