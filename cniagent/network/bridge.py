"""Bridge discovery from network CNI config."""

from __future__ import annotations

from typing import NamedTuple

from cniagent.config import settings
from cniagent.network.keywords import update_config_by_keywords
from cniagent.schemas import Host, Network


class BridgeInfo(NamedTuple):
    """Bridge device and subnet declared by a network's CNI config."""
    bridge: str
    bridge_subnet: str


def _str_prop(props: dict, key: str) -> str:
    value = props.get(key)
    return value if isinstance(value, str) else ""


def get_bridge_info(network: Network, host: Host) -> BridgeInfo:
    """Figure out the bridge name and subnet from a network's CNI config.

    Config files are visited in file name order. The first bridge-type file
    naming a bridge wins and its subnet is returned. If no file qualifies,
    the bridge is empty and the subnet is the one read from the last file
    visited.

    Keyword substitution is applied to each visited file in place.
    """
    conf = network.cni_config() or {}

    bridge = ""
    bridge_subnet = ""
    for file_name in sorted(conf):
        file = update_config_by_keywords(conf[file_name], host)
        props = file if isinstance(file, dict) else {}
        cni_type = _str_prop(props, "type")
        check_bridge = _str_prop(props, "bridge")
        bridge_subnet = _str_prop(props, "bridgeSubnet")

        if cni_type == settings.bridge_cni_type and check_bridge:
            bridge = check_bridge
            break

    return BridgeInfo(bridge, bridge_subnet)
