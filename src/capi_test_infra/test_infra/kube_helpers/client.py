from kubernetes.client import ApiClient
from kubernetes.client import Configuration as KubeConfiguration
from kubernetes.config import load_kube_config

from capi_test_infra.logger import log
from capi_test_infra.test_infra.config import TestConfig


def create_kube_api_client(config: TestConfig) -> ApiClient:
    """Kube API client for the management cluster, external kubeconfig or the Kind context"""
    kubeconfig_path = config.use_kubeconfig or None
    context = config.get_kube_context() or None
    log.info("creating kube client with config file: %s, context: %s", kubeconfig_path, context)

    conf = KubeConfiguration()
    load_kube_config(config_file=kubeconfig_path, context=context, client_configuration=conf)
    return ApiClient(configuration=conf)
