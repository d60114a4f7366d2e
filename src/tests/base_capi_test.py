import pytest
from kubernetes.client import ApiClient, AppsV1Api, CoreV1Api, CustomObjectsApi

from capi_test_infra.logger import SuppressAndLog, log
from capi_test_infra.test_infra import TestConfig
from capi_test_infra.test_infra.kube_helpers import create_kube_api_client
from capi_test_infra.test_infra.utils import DeploymentState, write_deployment_state
from tests.config import test_config as global_test_config


@pytest.mark.e2e
class BaseCAPITest:
    @pytest.fixture(scope="session")
    def capi_config(self) -> TestConfig:
        config = global_test_config
        log.info(
            f"Test configuration: provider={config.infra_provider_name}, repo_dir={config.repo_dir}, "
            f"namespace={config.workload_cluster_namespace}, external={config.is_external_cluster()}, "
            f"kind={config.is_kind_mode()}"
        )
        yield config

    @pytest.fixture(scope="session")
    def deployment_state(self, capi_config: TestConfig) -> DeploymentState:
        """Persist the run's namespace so later phases running as separate processes resume it"""
        state = DeploymentState(
            workload_cluster_namespace=capi_config.workload_cluster_namespace,
            workload_cluster_name=capi_config.workload_cluster_name,
            infra_provider=capi_config.infra_provider_name,
        )
        write_deployment_state(capi_config.repo_dir, state)
        yield state

    @pytest.fixture(scope="session")
    def kube_api_client(self, capi_config: TestConfig) -> ApiClient:
        api_client = create_kube_api_client(capi_config)
        yield api_client
        with SuppressAndLog(Exception):
            api_client.close()

    @pytest.fixture(scope="session")
    def apps_api(self, kube_api_client: ApiClient) -> AppsV1Api:
        return AppsV1Api(kube_api_client)

    @pytest.fixture(scope="session")
    def core_api(self, kube_api_client: ApiClient) -> CoreV1Api:
        return CoreV1Api(kube_api_client)

    @pytest.fixture(scope="session")
    def custom_api(self, kube_api_client: ApiClient) -> CustomObjectsApi:
        return CustomObjectsApi(kube_api_client)
