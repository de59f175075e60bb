"""Metadata client interface.

The resolution logic only needs three lookups from the cluster metadata
service. Concrete clients (HTTP, cached, ...) live with the agent process;
this module defines what they must provide.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from cniagent.schemas import Host, Network, Service


class MetadataError(Exception):
    """Base exception for metadata lookup errors."""


class MetadataClient(ABC):
    """Abstract metadata client.

    Implementations may block on I/O; timeouts and retries are theirs to
    handle. Errors should be raised, not returned.
    """

    @abstractmethod
    def get_networks(self) -> list[Network]:
        """Return all networks."""

    @abstractmethod
    def get_self_host(self) -> Host:
        """Return the host this agent runs on."""

    @abstractmethod
    def get_services(self) -> list[Service]:
        """Return all services with their containers."""


class StaticMetadataClient(MetadataClient):
    """Metadata client backed by an already-fetched snapshot.

    Any of ``errors`` keyed by method name ("get_networks", "get_self_host",
    "get_services") is raised instead of returning the snapshot value.
    """

    def __init__(
        self,
        networks: list[Network] | None = None,
        host: Host | None = None,
        services: list[Service] | None = None,
        errors: dict[str, Exception] | None = None,
    ):
        self._networks = list(networks or [])
        self._host = host or Host()
        self._services = list(services or [])
        self._errors = dict(errors or {})
        self.calls: list[str] = []

    def _check(self, method: str) -> None:
        self.calls.append(method)
        error = self._errors.get(method)
        if error is not None:
            raise error

    def get_networks(self) -> list[Network]:
        self._check("get_networks")
        return list(self._networks)

    def get_self_host(self) -> Host:
        self._check("get_self_host")
        return self._host

    def get_services(self) -> list[Service]:
        self._check("get_services")
        return list(self._services)
