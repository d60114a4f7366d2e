from dataclasses import dataclass, replace
from datetime import timedelta
from typing import Optional, Tuple

from consts import InfraProviderName


@dataclass(frozen=True)
class ControllerDef:
    """A controller deployment whose readiness is polled by name, namespace and pod selector"""

    display_name: str
    namespace: str
    deployment_name: str
    pod_selector: str
    timeout: Optional[timedelta] = None  # None means consts.DEFAULT_CONTROLLER_TIMEOUT


@dataclass(frozen=True)
class WebhookDef:
    display_name: str
    namespace: str
    service_name: str
    port: int = 443


@dataclass(frozen=True)
class CredentialSecretDef:
    name: str
    namespace: str
    required_fields: Tuple[str, ...] = ()
    # the secret check is skipped unless all of these are exported
    required_env_vars: Tuple[str, ...] = ()


@dataclass(frozen=True)
class InfraProvider:
    kind: InfraProviderName
    controllers: Tuple[ControllerDef, ...] = ()
    webhooks: Tuple[WebhookDef, ...] = ()
    credential_secret: Optional[CredentialSecretDef] = None
    deployment_charts: Tuple[str, ...] = ()
    mce_component_name: str = ""
    required_tools: Tuple[str, ...] = ()
    required_scripts: Tuple[str, ...] = ()

    @property
    def name(self) -> str:
        return self.kind.value

    def with_controller_timeout(self, display_name: str, timeout: timedelta) -> "InfraProvider":
        controllers = tuple(
            replace(c, timeout=timeout) if c.display_name == display_name else c for c in self.controllers
        )
        return replace(self, controllers=controllers)
