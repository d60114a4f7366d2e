import pytest

from capi_test_infra.test_infra import TestConfig
from tests.base_capi_test import BaseCAPITest


@pytest.mark.e2e
class TestPrerequisites(BaseCAPITest):
    def test_required_tools(self, capi_config: TestConfig):
        missing = capi_config.get_missing_tools()
        assert not missing, f"Missing required tools: {', '.join(missing)}"

    def test_required_scripts(self, capi_config: TestConfig):
        missing = capi_config.get_missing_scripts()
        assert not missing, f"Missing scripts in {capi_config.repo_dir}: {', '.join(missing)}"

    def test_timeouts(self, capi_config: TestConfig):
        for name in ("deployment_timeout", "aso_controller_timeout", "helm_install_timeout", "mce_enablement_timeout"):
            assert getattr(capi_config, name).total_seconds() > 0, f"{name} must be positive"

    def test_deployment_state_saved(self, capi_config: TestConfig, deployment_state):
        assert deployment_state.workload_cluster_namespace == capi_config.workload_cluster_namespace
