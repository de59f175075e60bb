"""cniagent - local network and router resolution for the CNI network agent."""

__version__ = "0.1.0"
