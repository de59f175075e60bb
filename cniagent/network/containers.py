"""Container state helpers."""

from __future__ import annotations

from cniagent.schemas import Container, ContainerState

RUNNING_STATES = frozenset({
    ContainerState.RUNNING.value,
    ContainerState.STARTING.value,
    ContainerState.STOPPING.value,
})


def is_container_considered_running(container: Container) -> bool:
    """Check if the container is in any of the states considered running."""
    return container.state in RUNNING_STATES
