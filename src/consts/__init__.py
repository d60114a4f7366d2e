from .consts import *  # noqa: F401,F403
from .consts import ClusterPhase, InfraProviderName
from .durations import HOUR, MINUTE, SECOND

__all__ = [
    "ClusterPhase",
    "InfraProviderName",
    "HOUR",
    "MINUTE",
    "SECOND",
]
