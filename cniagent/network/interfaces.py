"""Host network interface inspection.

Used by the agent to check whether a bridge already carries an address from
the subnet a network declares. Only IPv4 is supported.
"""

from __future__ import annotations

import ipaddress
import logging
import socket

import psutil

logger = logging.getLogger(__name__)


class InterfaceInspectionError(Exception):
    """Base exception for interface inspection failures."""


class InterfaceNotFoundError(InterfaceInspectionError):
    """The named interface does not exist on this host."""
    def __init__(self, interface_name: str):
        super().__init__(f"Interface not found: {interface_name}")
        self.interface_name = interface_name


class InterfaceAddressListError(InterfaceInspectionError):
    """Interface addresses could not be listed."""


class SubnetParseError(InterfaceInspectionError, ValueError):
    """The subnet is not a valid CIDR."""


def _parse_cidr_ip(subnet: str) -> ipaddress.IPv4Address | ipaddress.IPv6Address:
    """Return the address part of a CIDR string such as ``10.42.0.1/16``."""
    if "/" not in subnet:
        raise ValueError(f"missing prefix length in {subnet!r}")
    return ipaddress.ip_interface(subnet).ip


def _ipv4_networks(interface_name: str) -> list[ipaddress.IPv4Network]:
    try:
        all_addrs = psutil.net_if_addrs()
    except OSError as e:
        raise InterfaceAddressListError(
            f"Failed to list addresses of {interface_name}: {e}"
        ) from e

    if interface_name not in all_addrs:
        raise InterfaceNotFoundError(interface_name)

    networks = []
    for addr in all_addrs[interface_name]:
        if addr.family != socket.AF_INET:
            continue
        netmask = addr.netmask or "255.255.255.255"
        networks.append(ipaddress.ip_interface(f"{addr.address}/{netmask}").network)
    return networks


def has_ip_addr_from_subnet(interface_name: str, subnet: str) -> bool:
    """Check if the interface has an IPv4 address from the given subnet.

    Args:
        interface_name: Host interface name (e.g. "docker0")
        subnet: CIDR string (e.g. "10.42.0.0/16")

    Returns:
        True if one of the interface addresses' networks contains the
        subnet address

    Raises:
        InterfaceNotFoundError: interface does not exist
        InterfaceAddressListError: addresses could not be listed
        SubnetParseError: subnet is not a valid CIDR
    """
    networks = _ipv4_networks(interface_name)

    try:
        expected = _parse_cidr_ip(subnet)
    except ValueError as e:
        logger.error(f"Error parsing subnet: {subnet}")
        raise SubnetParseError(f"Invalid subnet {subnet!r}: {e}") from e

    return any(expected in network for network in networks)
