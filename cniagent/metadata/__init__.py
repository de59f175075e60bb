"""Metadata service access and resolution entry points."""

from cniagent.metadata.client import MetadataClient, MetadataError, StaticMetadataClient
from cniagent.metadata.resolver import (
    get_local_networks_and_routers_from_metadata,
    resolve_local_topology_from_metadata,
)

__all__ = [
    "MetadataClient",
    "MetadataError",
    "StaticMetadataClient",
    "get_local_networks_and_routers_from_metadata",
    "resolve_local_topology_from_metadata",
]
