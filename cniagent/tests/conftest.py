from __future__ import annotations

import pytest

from cniagent.schemas import Container, Host, Network, Service

HOST_UUID = "host-1"
ENV_UUID = "env-1"
STACK_UUID = "stack-ipsec"


@pytest.fixture
def host() -> Host:
    return Host(
        uuid=HOST_UUID,
        environment_uuid=ENV_UUID,
        name="node-a",
        labels={"io.rancher.network.bridge": "br-lab", "empty": ""},
    )


def make_network(uuid: str, environment_uuid: str = ENV_UUID, cni_config=None, **metadata) -> Network:
    if cni_config is not None:
        metadata["cniConfig"] = cni_config
    return Network(uuid=uuid, environment_uuid=environment_uuid, metadata=metadata)


def make_container(uuid: str, network_uuid: str, host_uuid: str = HOST_UUID, state: str = "running") -> Container:
    return Container(uuid=uuid, network_uuid=network_uuid, host_uuid=host_uuid, state=state)


def driver_service(uuid: str = "svc-driver", name: str = "cni-driver", stack_uuid: str = STACK_UUID) -> Service:
    return Service(
        uuid=uuid,
        stack_uuid=stack_uuid,
        kind="networkDriverService",
        name=name,
        primary_service_name="ipsec",
    )


def router_service(
    containers: list[Container],
    uuid: str = "svc-router",
    name: str = "ipsec",
    stack_uuid: str = STACK_UUID,
) -> Service:
    return Service(
        uuid=uuid,
        stack_uuid=stack_uuid,
        kind="service",
        name=name,
        primary_service_name="ipsec",
        containers=containers,
    )


def bridge_cni_config(bridge: str = "docker0", subnet: str = "10.42.0.0/16") -> dict:
    return {
        "10-rancher.conf": {
            "name": "rancher-cni-network",
            "type": "rancher-bridge",
            "bridge": bridge,
            "bridgeSubnet": subnet,
            "ipam": {"type": "rancher-cni-ipam", "isDebugLevel": "false"},
        }
    }
