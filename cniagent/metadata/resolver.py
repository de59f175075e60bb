"""Resolve local networks straight from the metadata service."""

from __future__ import annotations

import logging

from cniagent.metadata.client import MetadataClient
from cniagent.network.topology import LocalTopology, resolve_local_topology
from cniagent.schemas import Container, Network

logger = logging.getLogger(__name__)


def resolve_local_topology_from_metadata(client: MetadataClient) -> LocalTopology:
    """Fetch networks, self host and services, then resolve the local topology.

    Fetches run in that order. The first client error propagates as is and
    nothing after it is fetched.
    """
    networks = client.get_networks()
    host = client.get_self_host()
    services = client.get_services()
    logger.debug(
        f"Fetched {len(networks)} networks and {len(services)} services for host {host.uuid}"
    )
    return resolve_local_topology(networks, host, services)


def get_local_networks_and_routers_from_metadata(
    client: MetadataClient,
) -> tuple[list[Network], dict[str, Container]]:
    """Return (local networks, router map) for this host using metadata."""
    topology = resolve_local_topology_from_metadata(client)
    return topology.networks, topology.routers
