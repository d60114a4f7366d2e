import base64
import binascii
import os
from typing import List, Mapping, Optional

from kubernetes.client import CoreV1Api
from kubernetes.client.rest import ApiException

from capi_test_infra.test_infra.providers import CredentialSecretDef


def should_check_credential_secret(secret: Optional[CredentialSecretDef], environ: Mapping[str, str] = None) -> bool:
    """The secret is only expected when the credentials it is generated from were exported"""
    if secret is None:
        return False
    environ = os.environ if environ is None else environ
    return all(environ.get(var) for var in secret.required_env_vars)


def _decode(value: Optional[str]) -> str:
    if not value:
        return ""
    try:
        return base64.b64decode(value).decode().strip()
    except (binascii.Error, UnicodeDecodeError):
        return ""


def get_credential_secret_problems(core_api: CoreV1Api, secret: CredentialSecretDef) -> List[str]:
    ref = f"{secret.namespace}/{secret.name}"
    try:
        obj = core_api.read_namespaced_secret(name=secret.name, namespace=secret.namespace)
    except ApiException as e:
        if e.status != 404:
            raise
        return [f"credential secret {ref} not found"]

    data = obj.data or {}
    problems = []
    for field in secret.required_fields:
        if field not in data:
            problems.append(f"credential secret {ref} is missing field {field}")
        elif not _decode(data[field]):
            problems.append(f"credential secret {ref} has an empty {field}")

    return problems
