from enum import Enum

from .durations import MINUTE


class InfraProviderName(str, Enum):
    ARO = "aro"
    ROSA = "rosa"


class ClusterPhase:
    PENDING = "Pending"
    PROVISIONING = "Provisioning"
    PROVISIONED = "Provisioned"
    DELETING = "Deleting"
    FAILED = "Failed"


# Files & Directories
REPO_DIR_NAME = "cluster-api-installer-aro"
DEPLOYMENT_STATE_FILE = ".deployment-state.json"
DEPLOYMENT_STATE_LOCK_FILE = ".deployment-state.lock"
CREDENTIALS_YAML = "credentials.yaml"
ARO_YAML = "aro.yaml"
EXPECTED_GENERATED_FILES = (CREDENTIALS_YAML, ARO_YAML)
DEPLOY_CHARTS_SCRIPT = "scripts/deploy-charts.sh"
ARO_GEN_SCRIPT = "scripts/aro-hcp/gen.sh"
ROSA_GEN_SCRIPT = "scripts/rosa-hcp/gen.sh"

# Namespaces
MCE_NAMESPACE = "multicluster-engine"
NAMESPACE_TIMESTAMP_FORMAT = "%Y%m%d-%H%M%S"
KIND_CONTEXT_PREFIX = "kind-"

# CAPI core (provider independent)
CAPI_DISPLAY_NAME = "CAPI"
CAPI_CONTROLLER_DEPLOYMENT = "capi-controller-manager"
CAPI_WEBHOOK_SERVICE = "capi-webhook-service"
CAPI_WEBHOOK_PORT = 443
CAPI_POD_SELECTOR = "cluster.x-k8s.io/provider=cluster-api"
CAPI_DEPLOYMENT_CHART_NAME = "cluster-api"

# Resource kinds found at the top level of aro.yaml
CLUSTER_KINDS = ("Cluster",)
CONTROL_PLANE_KINDS = ("AROControlPlane", "ROSAControlPlane")
MACHINE_POOL_KINDS = ("MachinePool",)
CONTROL_PLANE_NAME_SUFFIX = "-control-plane"
MACHINE_POOL_NAME_SUFFIX = "-pool"

# Kube API
CAPI_API_GROUP = "cluster.x-k8s.io"
CAPI_API_VERSION = "v1beta1"
CAPI_CLUSTERS_PLURAL = "clusters"
MCE_API_GROUP = "multicluster.openshift.io"
MCE_API_VERSION = "v1"
MCE_PLURAL = "multiclusterengines"
MCE_COMPONENT_CAPI = "cluster-api"

# Tools every provider needs on the runner
BASE_REQUIRED_TOOLS = ("kubectl", "helm")

# Timeouts
DEFAULT_CONTROLLER_TIMEOUT = 10 * MINUTE
DEFAULT_CHECK_STATUSES_INTERVAL = 10
