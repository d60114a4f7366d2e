from typing import List, Optional

import waiting
from kubernetes.client import CustomObjectsApi

import consts
from capi_test_infra.logger import log


def get_multicluster_engine(custom_api: CustomObjectsApi) -> Optional[dict]:
    """The MultiClusterEngine is cluster scoped and expected to be a singleton"""
    engines = custom_api.list_cluster_custom_object(
        group=consts.MCE_API_GROUP, version=consts.MCE_API_VERSION, plural=consts.MCE_PLURAL
    )
    items = engines.get("items") or []
    return items[0] if items else None


def _get_components(mce: dict) -> List[dict]:
    return ((mce.get("spec") or {}).get("overrides") or {}).get("components") or []


def is_mce_component_enabled(custom_api: CustomObjectsApi, component_name: str) -> bool:
    mce = get_multicluster_engine(custom_api)
    if mce is None:
        return False
    return any(c.get("name") == component_name and c.get("enabled") for c in _get_components(mce))


def enable_mce_component(custom_api: CustomObjectsApi, component_name: str) -> bool:
    """
    Set spec.overrides.components[component_name].enabled=true on the MultiClusterEngine.
    :return: True if the engine was patched, False if the component was already enabled
    :raises RuntimeError: when no MultiClusterEngine exists
    """
    mce = get_multicluster_engine(custom_api)
    if mce is None:
        raise RuntimeError("MultiClusterEngine not found, can't enable component " + component_name)

    components = [dict(c) for c in _get_components(mce)]
    for component in components:
        if component.get("name") == component_name:
            if component.get("enabled"):
                log.info(f"MCE component {component_name} already enabled")
                return False
            component["enabled"] = True
            break
    else:
        components.append({"name": component_name, "enabled": True})

    name = mce["metadata"]["name"]
    log.info(f"Enabling MCE component {component_name} on {name}")
    custom_api.patch_cluster_custom_object(
        group=consts.MCE_API_GROUP,
        version=consts.MCE_API_VERSION,
        plural=consts.MCE_PLURAL,
        name=name,
        body={"spec": {"overrides": {"components": components}}},
    )
    return True


def wait_for_mce_component_enabled(custom_api: CustomObjectsApi, component_name: str, timeout_seconds: float):
    waiting.wait(
        lambda: is_mce_component_enabled(custom_api, component_name),
        timeout_seconds=timeout_seconds,
        sleep_seconds=consts.DEFAULT_CHECK_STATUSES_INTERVAL,
        waiting_for=f"MCE component {component_name} to be enabled",
    )
