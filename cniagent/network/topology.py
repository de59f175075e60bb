"""Local network and router resolution.

Given the metadata snapshot of all networks and services in the cluster,
work out which networks this host has to configure and which container is
this host's router for each of them.

The router containers belong to the primary service of the network plugin
stack, i.e. the service sitting next to the network driver service:

    stack "ipsec"
      - cni-driver   (kind=networkDriverService)
      - ipsec        (primary service, one router container per host)

Selection problems (no driver service, or several that cannot be told
apart) are logged and reported as a ResolutionOutcome; they never raise.
Callers get empty or partial results instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from cniagent import metrics
from cniagent.config import settings
from cniagent.schemas import Container, Host, Network, Service

logger = logging.getLogger(__name__)


class ResolutionOutcome(str, Enum):
    """How the network driver service selection went."""
    OK = "ok"
    NO_DRIVER_SERVICE = "no_driver_service"
    MULTIPLE_DRIVER_SERVICES = "multiple_driver_services"


@dataclass
class LocalTopology:
    """Result of a local resolution pass."""
    networks: list[Network] = field(default_factory=list)
    routers: dict[str, Container] = field(default_factory=dict)  # network uuid -> container
    network_service: Service = field(default_factory=Service)
    outcome: ResolutionOutcome = ResolutionOutcome.OK


def select_driver_services(services: list[Service]) -> list[Service]:
    """Pick the network driver service candidates.

    When exactly one service has the driver kind it is used as is. Otherwise
    only driver services carrying the well-known driver name are kept.
    """
    unfiltered = [s for s in services if s.kind == settings.driver_service_kind]
    if len(unfiltered) == 1:
        return unfiltered

    logger.debug(
        f"Found {len(unfiltered)} network driver services, filtering by name "
        f"'{settings.driver_service_name}': {[s.uuid for s in unfiltered]}"
    )
    return [s for s in unfiltered if s.name == settings.driver_service_name]


def find_network_service(driver: Service, services: list[Service]) -> Service:
    """Find the primary service of the driver's stack.

    Returns the first service (in the given order) that shares the driver's
    stack, is not the driver itself and is its own primary service. Returns
    an empty Service when there is none.
    """
    for service in services:
        if (
            service.stack_uuid == driver.stack_uuid
            and service.uuid != driver.uuid
            and service.name == service.primary_service_name
        ):
            return service
    return Service()


def _outcome_for(candidates: list[Service]) -> ResolutionOutcome:
    if not candidates:
        return ResolutionOutcome.NO_DRIVER_SERVICE
    if len(candidates) > 1:
        return ResolutionOutcome.MULTIPLE_DRIVER_SERVICES
    return ResolutionOutcome.OK


def resolve_local_topology(
    networks: list[Network],
    host: Host,
    services: list[Service],
) -> LocalTopology:
    """Resolve the networks local to this host and their router containers.

    Args:
        networks: All networks known to metadata
        host: The local host
        services: All services known to metadata

    Returns:
        LocalTopology with the local networks (input order kept), the
        router map and the driver selection outcome
    """
    candidates = select_driver_services(services)
    logger.debug(f"Network driver services: {[s.uuid for s in candidates]}")

    outcome = _outcome_for(candidates)
    metrics.driver_service_resolution.labels(outcome=outcome.value).inc()
    if outcome != ResolutionOutcome.OK:
        logger.error(f"Expected one network driver service, but found: {len(candidates)}")

    network_service = Service()
    if candidates:
        network_service = find_network_service(candidates[0], services)

    # Last container wins if several serve the same network on this host
    routers: dict[str, Container] = {}
    for container in network_service.containers:
        if container.host_uuid == host.uuid:
            routers[container.network_uuid] = container

    local_networks = []
    for network in networks:
        if network.environment_uuid != host.environment_uuid:
            continue
        if network.cni_config() is None:
            continue
        # Networks without a router here are left over from older plugin
        # stacks (e.g. mid-upgrade) and are not ours to configure
        if network.uuid not in routers:
            continue
        local_networks.append(network)

    metrics.local_networks_resolved.set(len(local_networks))
    router_uuids = {net_uuid: c.uuid for net_uuid, c in routers.items()}
    logger.debug(
        f"Local networks: {[n.uuid for n in local_networks]}, routers: {router_uuids}"
    )
    return LocalTopology(
        networks=local_networks,
        routers=routers,
        network_service=network_service,
        outcome=outcome,
    )


def get_local_networks_and_routers(
    networks: list[Network],
    host: Host,
    services: list[Service],
) -> tuple[list[Network], dict[str, Container]]:
    """Return (local networks, router map) for this host."""
    topology = resolve_local_topology(networks, host, services)
    return topology.networks, topology.routers
