from .deployment_state import DeploymentState, get_deployment_state_path, read_deployment_state, write_deployment_state
from .env_var import DurationEnvVar, EnvVar, is_true
from .lazy import LazyValue
from .resolved import Resolved, VariableOrigin
from .utils import file_lock_context, format_duration, get_env, parse_duration, run_command, unique

__all__ = [
    "DeploymentState",
    "DurationEnvVar",
    "EnvVar",
    "LazyValue",
    "Resolved",
    "VariableOrigin",
    "file_lock_context",
    "format_duration",
    "get_deployment_state_path",
    "get_env",
    "is_true",
    "parse_duration",
    "read_deployment_state",
    "run_command",
    "unique",
    "write_deployment_state",
]
