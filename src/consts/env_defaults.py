import tempfile
from pathlib import Path

from .consts import REPO_DIR_NAME, InfraProviderName
from .durations import MINUTE

DEFAULT_REPO_URL = "https://github.com/stolostron/cluster-api-installer"
DEFAULT_REPO_BRANCH = "main"
DEFAULT_REPO_DIR = str(Path(tempfile.gettempdir()) / REPO_DIR_NAME)

DEFAULT_MANAGEMENT_CLUSTER_NAME = "capz-tests-stage"
DEFAULT_WORKLOAD_CLUSTER_NAME = "capz-tests-cluster"
DEFAULT_WORKLOAD_CLUSTER_NAMESPACE_PREFIX = "capz-test"
DEFAULT_OCP_VERSION = "4.20"
DEFAULT_REGION = "uksouth"
DEFAULT_CAPZ_USER = "rcapd"
DEFAULT_DEPLOYMENT_ENV = "stage"
DEFAULT_INFRA_PROVIDER = InfraProviderName.ARO.value

DEFAULT_CAPI_NAMESPACE = "capi-system"
DEFAULT_CAPZ_NAMESPACE = "capz-system"
DEFAULT_CAPA_NAMESPACE = "capa-system"

DEFAULT_CLUSTERCTL_BIN = "./bin/clusterctl"
DEFAULT_SCRIPTS_PATH = "./scripts"
DEFAULT_ARO_GEN_SCRIPT_PATH = "./scripts/aro-hcp/gen.sh"
DEFAULT_ROSA_GEN_SCRIPT_PATH = "./scripts/rosa-hcp/gen.sh"

DEFAULT_DEPLOYMENT_TIMEOUT = 60 * MINUTE
# ASO scans, installs and restarts to pick up CRDs before it reports ready
DEFAULT_ASO_CONTROLLER_TIMEOUT = 10 * MINUTE
DEFAULT_HELM_INSTALL_TIMEOUT = 10 * MINUTE
DEFAULT_MCE_ENABLEMENT_TIMEOUT = 15 * MINUTE

DEFAULT_CLEANUP_PREFIX = "rcap"
