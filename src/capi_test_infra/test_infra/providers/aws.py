import consts
from consts import InfraProviderName

from .infra_provider import ControllerDef, CredentialSecretDef, InfraProvider, WebhookDef

CAPA_DISPLAY_NAME = "CAPA"


def new_aws_provider(namespace: str) -> InfraProvider:
    """AWS (CAPA) provider, `namespace` is the resolved CAPA controller namespace"""
    return InfraProvider(
        kind=InfraProviderName.ROSA,
        controllers=(
            ControllerDef(
                display_name=CAPA_DISPLAY_NAME,
                namespace=namespace,
                deployment_name="capa-controller-manager",
                pod_selector="cluster.x-k8s.io/provider=infrastructure-aws",
            ),
        ),
        webhooks=(WebhookDef(CAPA_DISPLAY_NAME, namespace, "capa-webhook-service", 443),),
        credential_secret=CredentialSecretDef(
            name="capa-manager-bootstrap-credentials",
            namespace=namespace,
            required_fields=("credentials",),
            required_env_vars=("AWS_ACCESS_KEY_ID", "AWS_SECRET_ACCESS_KEY"),
        ),
        deployment_charts=("cluster-api-provider-aws",),
        mce_component_name="cluster-api-provider-aws",
        required_tools=("aws",),
        required_scripts=(consts.DEPLOY_CHARTS_SCRIPT, consts.ROSA_GEN_SCRIPT),
    )
