from datetime import timedelta
from typing import Optional

import waiting
from kubernetes.client import AppsV1Api
from kubernetes.client.rest import ApiException

import consts
from capi_test_infra.logger import log
from capi_test_infra.test_infra.providers import ControllerDef


def is_controller_ready(apps_api: AppsV1Api, controller: ControllerDef) -> bool:
    try:
        deployment = apps_api.read_namespaced_deployment(
            name=controller.deployment_name, namespace=controller.namespace
        )
    except ApiException as e:
        if e.status != 404:
            raise
        log.info(f"{controller.display_name} deployment {controller.namespace}/{controller.deployment_name} not found")
        return False

    desired = deployment.spec.replicas if deployment.spec.replicas is not None else 1
    available = deployment.status.available_replicas or 0
    if desired > 0 and available >= desired:
        return True

    log.info(
        f"{controller.display_name} controller not ready yet, {available}/{desired} replicas available "
        f"(pods: {controller.pod_selector})"
    )
    return False


def get_controller_timeout(controller: ControllerDef, default: Optional[timedelta] = None) -> timedelta:
    return controller.timeout or default or consts.DEFAULT_CONTROLLER_TIMEOUT


def wait_for_controller_ready(
    apps_api: AppsV1Api,
    controller: ControllerDef,
    default_timeout: Optional[timedelta] = None,
    interval: float = consts.DEFAULT_CHECK_STATUSES_INTERVAL,
) -> None:
    timeout = get_controller_timeout(controller, default_timeout)
    log.info(f"Waiting up to {timeout} for {controller.display_name} controller in {controller.namespace}")

    waiting.wait(
        lambda: is_controller_ready(apps_api, controller),
        timeout_seconds=timeout.total_seconds(),
        sleep_seconds=interval,
        waiting_for=f"{controller.display_name} deployment {controller.namespace}/{controller.deployment_name} "
        "to be available",
    )
