from datetime import timedelta

import pytest

from capi_test_infra.test_infra.providers import InfraProviderName, new_aws_provider, new_azure_provider


def test_azure_provider():
    p = new_azure_provider("capz-system")

    assert p.name == "aro"
    assert p.kind == InfraProviderName.ARO

    assert [c.display_name for c in p.controllers] == ["CAPZ", "ASO"]
    assert [c.deployment_name for c in p.controllers] == [
        "capz-controller-manager",
        "azureserviceoperator-controller-manager",
    ]
    assert p.controllers[0].pod_selector == "cluster.x-k8s.io/provider=infrastructure-azure"
    assert p.controllers[1].pod_selector == "app.kubernetes.io/name=azure-service-operator"

    assert [w.service_name for w in p.webhooks] == ["capz-webhook-service", "azureserviceoperator-webhook-service"]
    assert all(w.port == 443 for w in p.webhooks)

    assert p.credential_secret is not None
    assert p.credential_secret.name == "aso-controller-settings"
    assert p.credential_secret.required_fields == (
        "AZURE_TENANT_ID",
        "AZURE_SUBSCRIPTION_ID",
        "AZURE_CLIENT_ID",
        "AZURE_CLIENT_SECRET",
    )
    assert p.credential_secret.required_env_vars == ("AZURE_CLIENT_ID", "AZURE_CLIENT_SECRET")

    assert p.deployment_charts == ("cluster-api-provider-azure",)
    assert p.mce_component_name == "cluster-api-provider-azure-preview"
    assert p.required_tools == ("az",)
    assert p.required_scripts == ("scripts/deploy-charts.sh", "scripts/aro-hcp/gen.sh")


def test_aws_provider():
    p = new_aws_provider("capa-system")

    assert p.name == "rosa"
    assert len(p.controllers) == 1
    assert p.controllers[0].display_name == "CAPA"
    assert p.controllers[0].deployment_name == "capa-controller-manager"
    assert p.controllers[0].pod_selector == "cluster.x-k8s.io/provider=infrastructure-aws"

    assert len(p.webhooks) == 1
    assert p.webhooks[0].service_name == "capa-webhook-service"
    assert p.webhooks[0].port == 443

    assert p.credential_secret.name == "capa-manager-bootstrap-credentials"
    assert p.credential_secret.required_fields == ("credentials",)
    assert p.credential_secret.required_env_vars == ("AWS_ACCESS_KEY_ID", "AWS_SECRET_ACCESS_KEY")

    assert p.deployment_charts == ("cluster-api-provider-aws",)
    assert p.mce_component_name == "cluster-api-provider-aws"
    assert p.required_tools == ("aws",)
    assert p.required_scripts == ("scripts/deploy-charts.sh", "scripts/rosa-hcp/gen.sh")


@pytest.mark.parametrize("new_provider", [new_azure_provider, new_aws_provider])
def test_namespace_propagates_to_every_descriptor(new_provider):
    p = new_provider("custom-namespace")

    assert {c.namespace for c in p.controllers} == {"custom-namespace"}
    assert {w.namespace for w in p.webhooks} == {"custom-namespace"}
    assert p.credential_secret.namespace == "custom-namespace"


def test_with_controller_timeout_only_touches_named_controller():
    p = new_azure_provider("capz-system")
    updated = p.with_controller_timeout("ASO", timedelta(minutes=20))

    assert updated.controllers[0].timeout is None
    assert updated.controllers[1].timeout == timedelta(minutes=20)
    assert p.controllers[1].timeout is None
