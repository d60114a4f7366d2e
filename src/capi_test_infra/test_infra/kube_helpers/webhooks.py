from typing import List

from kubernetes.client import CoreV1Api
from kubernetes.client.rest import ApiException

from capi_test_infra.test_infra.providers import WebhookDef


def get_webhook_problems(core_api: CoreV1Api, webhook: WebhookDef) -> List[str]:
    """Check the webhook service exposes its port and is backed by ready endpoints. Empty list means healthy."""
    ref = f"{webhook.namespace}/{webhook.service_name}"

    try:
        service = core_api.read_namespaced_service(name=webhook.service_name, namespace=webhook.namespace)
    except ApiException as e:
        if e.status != 404:
            raise
        return [f"{webhook.display_name} webhook service {ref} not found"]

    problems = []
    ports = [p.port for p in (service.spec.ports or [])]
    if webhook.port not in ports:
        problems.append(f"{webhook.display_name} webhook service {ref} doesn't expose port {webhook.port} ({ports})")

    try:
        endpoints = core_api.read_namespaced_endpoints(name=webhook.service_name, namespace=webhook.namespace)
    except ApiException as e:
        if e.status != 404:
            raise
        return problems + [f"{webhook.display_name} webhook service {ref} has no endpoints"]

    addresses = [address for subset in (endpoints.subsets or []) for address in (subset.addresses or [])]
    if not addresses:
        problems.append(f"{webhook.display_name} webhook service {ref} has no ready endpoint addresses")

    return problems
