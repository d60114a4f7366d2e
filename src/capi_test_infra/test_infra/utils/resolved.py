from enum import Enum
from typing import Any, NamedTuple


class VariableOrigin(Enum):
    ENVIRONMENT = "ENVIRONMENT"
    STATE_FILE = "STATE_FILE"
    MANIFEST = "MANIFEST"
    KUBECONFIG = "KUBECONFIG"
    GENERATED = "GENERATED"
    DEFAULT = "DEFAULT"
    FALLBACK = "FALLBACK"


class Resolved(NamedTuple):
    """A value that is always usable, along with where it came from"""

    value: Any
    origin: VariableOrigin

    @property
    def is_fallback(self) -> bool:
        return self.origin in (VariableOrigin.DEFAULT, VariableOrigin.FALLBACK)
