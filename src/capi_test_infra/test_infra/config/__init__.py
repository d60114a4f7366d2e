from .env_variables import EnvVariables, env_variables
from .test_config import (
    TestConfig,
    get_controller_namespace,
    get_default_repo_dir,
    get_workload_cluster_namespace,
    get_workload_cluster_namespace_origin,
    new_test_config,
    parse_mce_auto_enable,
    reset_process_values,
    resolve_infra_provider_name,
    resolve_workload_cluster_namespace,
)

__all__ = [
    "EnvVariables",
    "TestConfig",
    "env_variables",
    "get_controller_namespace",
    "get_default_repo_dir",
    "get_workload_cluster_namespace",
    "get_workload_cluster_namespace_origin",
    "new_test_config",
    "parse_mce_auto_enable",
    "reset_process_values",
    "resolve_infra_provider_name",
    "resolve_workload_cluster_namespace",
]
