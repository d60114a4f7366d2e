from .client import create_kube_api_client
from .cluster import get_cluster_phase, wait_for_cluster_provisioned
from .controllers import get_controller_timeout, is_controller_ready, wait_for_controller_ready
from .credentials import get_credential_secret_problems, should_check_credential_secret
from .mce import enable_mce_component, get_multicluster_engine, is_mce_component_enabled, wait_for_mce_component_enabled
from .webhooks import get_webhook_problems

__all__ = [
    "create_kube_api_client",
    "enable_mce_component",
    "get_cluster_phase",
    "get_controller_timeout",
    "get_credential_secret_problems",
    "get_multicluster_engine",
    "get_webhook_problems",
    "is_controller_ready",
    "is_mce_component_enabled",
    "should_check_credential_secret",
    "wait_for_cluster_provisioned",
    "wait_for_controller_ready",
    "wait_for_mce_component_enabled",
]
