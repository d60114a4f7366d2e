from dataclasses import dataclass

from capi_test_infra.test_infra.utils import DurationEnvVar, EnvVar, is_true
from consts import env_defaults


@dataclass(frozen=True)
class _EnvVariables:
    repo_dir: EnvVar = EnvVar(["ARO_REPO_DIR"])
    repo_url: EnvVar = EnvVar(["ARO_REPO_URL"], default=env_defaults.DEFAULT_REPO_URL)
    repo_branch: EnvVar = EnvVar(["ARO_REPO_BRANCH"], default=env_defaults.DEFAULT_REPO_BRANCH)

    workload_cluster_namespace: EnvVar = EnvVar(["WORKLOAD_CLUSTER_NAMESPACE"])
    workload_cluster_namespace_prefix: EnvVar = EnvVar(
        ["WORKLOAD_CLUSTER_NAMESPACE_PREFIX"], default=env_defaults.DEFAULT_WORKLOAD_CLUSTER_NAMESPACE_PREFIX
    )
    management_cluster_name: EnvVar = EnvVar(
        ["MANAGEMENT_CLUSTER_NAME"], default=env_defaults.DEFAULT_MANAGEMENT_CLUSTER_NAME
    )
    workload_cluster_name: EnvVar = EnvVar(
        ["WORKLOAD_CLUSTER_NAME"], default=env_defaults.DEFAULT_WORKLOAD_CLUSTER_NAME
    )
    cluster_name_prefix: EnvVar = EnvVar(["CS_CLUSTER_NAME"])
    ocp_version: EnvVar = EnvVar(["OCP_VERSION"], default=env_defaults.DEFAULT_OCP_VERSION)
    region: EnvVar = EnvVar(["REGION"], default=env_defaults.DEFAULT_REGION)
    azure_subscription_name: EnvVar = EnvVar(["AZURE_SUBSCRIPTION_NAME"], default="")
    environment: EnvVar = EnvVar(["DEPLOYMENT_ENV"], default=env_defaults.DEFAULT_DEPLOYMENT_ENV)
    capz_user: EnvVar = EnvVar(["CAPZ_USER"], default=env_defaults.DEFAULT_CAPZ_USER)

    capi_namespace: EnvVar = EnvVar(["CAPI_NAMESPACE"], default=env_defaults.DEFAULT_CAPI_NAMESPACE)
    capz_namespace: EnvVar = EnvVar(["CAPZ_NAMESPACE"], default=env_defaults.DEFAULT_CAPZ_NAMESPACE)
    capa_namespace: EnvVar = EnvVar(["CAPA_NAMESPACE"], default=env_defaults.DEFAULT_CAPA_NAMESPACE)

    use_kubeconfig: EnvVar = EnvVar(["USE_KUBECONFIG"], default="")
    use_k8s: EnvVar = EnvVar(["USE_K8S"], loader=is_true, default=False)
    use_kind: EnvVar = EnvVar(["USE_KIND"], loader=is_true, default=False)

    clusterctl_bin_path: EnvVar = EnvVar(["CLUSTERCTL_BIN"], default=env_defaults.DEFAULT_CLUSTERCTL_BIN)
    scripts_path: EnvVar = EnvVar(["SCRIPTS_PATH"], default=env_defaults.DEFAULT_SCRIPTS_PATH)
    gen_script_path: EnvVar = EnvVar(["GEN_SCRIPT_PATH"])

    deployment_timeout: DurationEnvVar = DurationEnvVar(
        ["DEPLOYMENT_TIMEOUT"], default=env_defaults.DEFAULT_DEPLOYMENT_TIMEOUT
    )
    aso_controller_timeout: DurationEnvVar = DurationEnvVar(
        ["ASO_CONTROLLER_TIMEOUT"], default=env_defaults.DEFAULT_ASO_CONTROLLER_TIMEOUT
    )
    helm_install_timeout: DurationEnvVar = DurationEnvVar(
        ["HELM_INSTALL_TIMEOUT"], default=env_defaults.DEFAULT_HELM_INSTALL_TIMEOUT
    )
    mce_enablement_timeout: DurationEnvVar = DurationEnvVar(
        ["MCE_ENABLEMENT_TIMEOUT"], default=env_defaults.DEFAULT_MCE_ENABLEMENT_TIMEOUT
    )
    mce_auto_enable: EnvVar = EnvVar(["MCE_AUTO_ENABLE"], loader=is_true)

    infra_provider: EnvVar = EnvVar(["INFRA_PROVIDER"], default=env_defaults.DEFAULT_INFRA_PROVIDER)


@dataclass(frozen=True)
class EnvVariables(_EnvVariables):
    def __getattribute__(self, item):
        """Keep __getattribute__ normal behavior for all class attributes but the EnvVar objects.
        If the return value supposed to be of type EnvVar it returns EnvVar.value instead, This makes the EnvVar
        mechanism transparent to whoever uses EnvVariables instance"""

        attr = super().__getattribute__(item)
        if isinstance(attr, EnvVar):
            return attr.value
        return attr

    def get_env(self, item: str) -> EnvVar:
        return _EnvVariables.__getattribute__(self, item)


env_variables = EnvVariables()
