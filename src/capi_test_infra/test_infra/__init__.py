from .config import TestConfig, new_test_config
from .providers import ControllerDef, CredentialSecretDef, InfraProvider, WebhookDef

__all__ = [
    "ControllerDef",
    "CredentialSecretDef",
    "InfraProvider",
    "TestConfig",
    "WebhookDef",
    "new_test_config",
]
