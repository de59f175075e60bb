"""Host keyword substitution for CNI configuration.

CNI config files served through network metadata may carry placeholders
that only make sense on a particular host. The only keyword currently
understood is the host label reference:

    "bridge": "__host_label__: io.rancher.network.bridge"

which is replaced by the value of that label on the local host, or by an
empty string when the label is missing or empty.
"""

from __future__ import annotations

from cniagent.schemas import ConfigNode, Host

HOST_LABEL_KEYWORD = "__host_label__"


def _resolve_host_label(value: str, host: Host) -> str:
    """Resolve a ``__host_label__: <name>`` reference against host labels."""
    splits = value.split(":", 1)
    if len(splits) < 2:
        return ""
    label = splits[1].strip()
    return host.labels.get(label) or ""


def update_config_by_keywords(config: ConfigNode, host: Host) -> ConfigNode:
    """Replace host keywords in a CNI config tree.

    Mappings are rewritten in place and returned; any other value is
    returned untouched.

    Args:
        config: CNI config node (usually the parsed contents of one file)
        host: Local host whose labels are substituted

    Returns:
        The same config object, with keyword strings replaced
    """
    if not isinstance(config, dict):
        return config

    for key, value in config.items():
        if isinstance(value, str):
            if value.startswith(HOST_LABEL_KEYWORD):
                config[key] = _resolve_host_label(value, host)
        else:
            config[key] = update_config_by_keywords(value, host)

    return config
