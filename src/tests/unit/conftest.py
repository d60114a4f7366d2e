import pytest

from capi_test_infra.test_infra.config import reset_process_values

CONFIG_ENV_VARS = (
    "ARO_REPO_DIR",
    "ARO_REPO_URL",
    "ARO_REPO_BRANCH",
    "WORKLOAD_CLUSTER_NAMESPACE",
    "WORKLOAD_CLUSTER_NAMESPACE_PREFIX",
    "MANAGEMENT_CLUSTER_NAME",
    "WORKLOAD_CLUSTER_NAME",
    "CS_CLUSTER_NAME",
    "OCP_VERSION",
    "REGION",
    "AZURE_SUBSCRIPTION_NAME",
    "DEPLOYMENT_ENV",
    "CAPZ_USER",
    "CAPI_NAMESPACE",
    "CAPZ_NAMESPACE",
    "CAPA_NAMESPACE",
    "USE_KUBECONFIG",
    "USE_K8S",
    "USE_KIND",
    "CLUSTERCTL_BIN",
    "SCRIPTS_PATH",
    "GEN_SCRIPT_PATH",
    "DEPLOYMENT_TIMEOUT",
    "ASO_CONTROLLER_TIMEOUT",
    "HELM_INSTALL_TIMEOUT",
    "MCE_ENABLEMENT_TIMEOUT",
    "MCE_AUTO_ENABLE",
    "INFRA_PROVIDER",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # Empty values count as unset, and setenv makes monkeypatch restore whatever the code under test exports
    for var in CONFIG_ENV_VARS:
        monkeypatch.setenv(var, "")
    reset_process_values()
    yield monkeypatch
    reset_process_values()


@pytest.fixture
def repo_dir(tmp_path, monkeypatch):
    path = tmp_path / "cluster-api-installer"
    path.mkdir()
    monkeypatch.setenv("ARO_REPO_DIR", str(path))
    return path
