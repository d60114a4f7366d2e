from typing import Optional

import waiting
from kubernetes.client import CustomObjectsApi
from kubernetes.client.rest import ApiException

import consts
from capi_test_infra.logger import log


def get_cluster_phase(custom_api: CustomObjectsApi, namespace: str, name: str) -> Optional[str]:
    try:
        cluster = custom_api.get_namespaced_custom_object(
            group=consts.CAPI_API_GROUP,
            version=consts.CAPI_API_VERSION,
            namespace=namespace,
            plural=consts.CAPI_CLUSTERS_PLURAL,
            name=name,
        )
    except ApiException as e:
        if e.status != 404:
            raise
        return None
    return (cluster.get("status") or {}).get("phase")


def _is_cluster_provisioned(custom_api: CustomObjectsApi, namespace: str, name: str) -> bool:
    phase = get_cluster_phase(custom_api, namespace, name)
    if phase == consts.ClusterPhase.FAILED:
        raise RuntimeError(f"Cluster {namespace}/{name} is in phase {phase}")

    log.info(f"Cluster {namespace}/{name} phase: {phase}")
    return phase == consts.ClusterPhase.PROVISIONED


def wait_for_cluster_provisioned(
    custom_api: CustomObjectsApi,
    namespace: str,
    name: str,
    timeout_seconds: float,
    interval: float = consts.DEFAULT_CHECK_STATUSES_INTERVAL,
) -> None:
    waiting.wait(
        lambda: _is_cluster_provisioned(custom_api, namespace, name),
        timeout_seconds=timeout_seconds,
        sleep_seconds=interval,
        waiting_for=f"cluster {namespace}/{name} to be {consts.ClusterPhase.PROVISIONED}",
    )
