from pathlib import Path
from typing import Iterable, List, Union

import yaml

import consts
from capi_test_infra.test_infra.exceptions import KubeconfigContextError, ManifestResourceNotFoundError


def load_manifest_documents(path: Union[str, Path]) -> List[dict]:
    """Load every mapping document of a (possibly multi-document) YAML manifest"""
    # binary mode makes PyYAML report undecodable content as a YAMLError
    with open(path, "rb") as f:
        return [doc for doc in yaml.safe_load_all(f) if isinstance(doc, dict)]


def extract_resource_name(path: Union[str, Path], kinds: Iterable[str]) -> str:
    """
    Return metadata.name of the first top-level resource whose kind is one of `kinds`.
    :raises OSError: when the file can't be read
    :raises yaml.YAMLError: when the file isn't valid YAML
    :raises ManifestResourceNotFoundError: when no named resource of the requested kinds exists
    """
    kinds = tuple(kinds)
    for doc in load_manifest_documents(path):
        if doc.get("kind") not in kinds:
            continue
        metadata = doc.get("metadata")
        name = metadata.get("name") if isinstance(metadata, dict) else None
        if isinstance(name, str) and name:
            return name

    raise ManifestResourceNotFoundError(path, kinds)


def extract_cluster_name_from_yaml(path: Union[str, Path]) -> str:
    return extract_resource_name(path, consts.CLUSTER_KINDS)


def extract_control_plane_name_from_yaml(path: Union[str, Path]) -> str:
    return extract_resource_name(path, consts.CONTROL_PLANE_KINDS)


def extract_machine_pool_name_from_yaml(path: Union[str, Path]) -> str:
    return extract_resource_name(path, consts.MACHINE_POOL_KINDS)


def extract_current_context(kubeconfig_path: Union[str, Path]) -> str:
    with open(kubeconfig_path, "rb") as f:
        kubeconfig = yaml.safe_load(f)

    context = kubeconfig.get("current-context") if isinstance(kubeconfig, dict) else None
    if not isinstance(context, str) or not context:
        raise KubeconfigContextError(f"No current-context set in {kubeconfig_path}")
    return context
