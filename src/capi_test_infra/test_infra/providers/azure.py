import consts
from consts import InfraProviderName

from .infra_provider import ControllerDef, CredentialSecretDef, InfraProvider, WebhookDef

CAPZ_DISPLAY_NAME = "CAPZ"
ASO_DISPLAY_NAME = "ASO"


def new_azure_provider(namespace: str) -> InfraProvider:
    """
    Azure (CAPZ/ASO) provider.
    :param namespace: resolved namespace of the CAPZ and ASO controllers, e.g. "capz-system" on Kind
                      or "multicluster-engine" when the controllers run inside MCE
    """
    return InfraProvider(
        kind=InfraProviderName.ARO,
        controllers=(
            ControllerDef(
                display_name=CAPZ_DISPLAY_NAME,
                namespace=namespace,
                deployment_name="capz-controller-manager",
                pod_selector="cluster.x-k8s.io/provider=infrastructure-azure",
            ),
            ControllerDef(
                display_name=ASO_DISPLAY_NAME,
                namespace=namespace,
                deployment_name="azureserviceoperator-controller-manager",
                pod_selector="app.kubernetes.io/name=azure-service-operator",
            ),
        ),
        webhooks=(
            WebhookDef(CAPZ_DISPLAY_NAME, namespace, "capz-webhook-service", 443),
            WebhookDef(ASO_DISPLAY_NAME, namespace, "azureserviceoperator-webhook-service", 443),
        ),
        credential_secret=CredentialSecretDef(
            name="aso-controller-settings",
            namespace=namespace,
            required_fields=(
                "AZURE_TENANT_ID",
                "AZURE_SUBSCRIPTION_ID",
                "AZURE_CLIENT_ID",
                "AZURE_CLIENT_SECRET",
            ),
            required_env_vars=("AZURE_CLIENT_ID", "AZURE_CLIENT_SECRET"),
        ),
        deployment_charts=("cluster-api-provider-azure",),
        mce_component_name="cluster-api-provider-azure-preview",
        required_tools=("az",),
        required_scripts=(consts.DEPLOY_CHARTS_SCRIPT, consts.ARO_GEN_SCRIPT),
    )
