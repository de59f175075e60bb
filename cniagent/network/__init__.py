"""CNI config keyword handling and local network resolution."""

from cniagent.network.bridge import BridgeInfo, get_bridge_info
from cniagent.network.containers import is_container_considered_running
from cniagent.network.keywords import HOST_LABEL_KEYWORD, update_config_by_keywords
from cniagent.network.topology import (
    LocalTopology,
    ResolutionOutcome,
    get_local_networks_and_routers,
    resolve_local_topology,
)

__all__ = [
    "BridgeInfo",
    "HOST_LABEL_KEYWORD",
    "LocalTopology",
    "ResolutionOutcome",
    "get_bridge_info",
    "get_local_networks_and_routers",
    "is_container_considered_running",
    "resolve_local_topology",
    "update_config_by_keywords",
]
