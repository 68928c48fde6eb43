"""
Connection values and the literal/templated mode variants.

The field names of ConnectionValues are the placeholder names used by
kubeconfig.tpl. Renaming a field means changing the template too.
"""

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Tuple, Union

DEFAULT_SERVICE_ACCOUNT = "helm"


@dataclass
class ConnectionValues:
    """Everything needed to address and authenticate to a cluster."""

    skip_tls_verify: bool = False
    certificate: str = ""
    api_server: str = ""
    namespace: str = ""
    service_account: str = ""
    token: str = ""
    literal_config: str = ""
    context_name: str = ""

    def to_context(self) -> Dict[str, Any]:
        """Template rendering context, keyed by field name."""
        return asdict(self)


# Placeholder contract shared with kubeconfig.tpl
TEMPLATE_FIELDS: Tuple[str, ...] = tuple(f.name for f in fields(ConnectionValues))


@dataclass(frozen=True)
class LiteralMode:
    """A complete kubeconfig supplied by the caller, written verbatim."""

    content: str

    name = "literal"


@dataclass(frozen=True)
class TemplatedMode:
    """A kubeconfig rendered from the template against connection values."""

    values: ConnectionValues

    name = "templated"


Mode = Union[LiteralMode, TemplatedMode]


def resolve_mode(values: ConnectionValues) -> Mode:
    """
    Decide which mode applies to a run.

    This is the only place where an empty literal_config is interpreted.
    The templated variant carries its own copy of the values so later
    defaulting does not leak back to the caller.
    """
    if values.literal_config:
        return LiteralMode(content=values.literal_config)
    return TemplatedMode(values=replace(values))
