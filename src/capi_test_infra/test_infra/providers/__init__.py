from consts import InfraProviderName

from .aws import CAPA_DISPLAY_NAME, new_aws_provider
from .azure import ASO_DISPLAY_NAME, CAPZ_DISPLAY_NAME, new_azure_provider
from .infra_provider import ControllerDef, CredentialSecretDef, InfraProvider, WebhookDef

__all__ = [
    "ASO_DISPLAY_NAME",
    "CAPA_DISPLAY_NAME",
    "CAPZ_DISPLAY_NAME",
    "ControllerDef",
    "CredentialSecretDef",
    "InfraProvider",
    "InfraProviderName",
    "WebhookDef",
    "new_aws_provider",
    "new_azure_provider",
]
