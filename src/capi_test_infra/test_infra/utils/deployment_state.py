import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Optional, Union

import consts
from capi_test_infra.logger import log
from capi_test_infra.test_infra.utils.utils import file_lock_context


@dataclass
class DeploymentState:
    """Values shared between test phases that run as separate processes"""

    workload_cluster_namespace: str = ""
    workload_cluster_name: str = ""
    infra_provider: str = ""


def get_deployment_state_path(repo_dir: Union[str, Path]) -> Path:
    return Path(repo_dir) / consts.DEPLOYMENT_STATE_FILE


def read_deployment_state(repo_dir: Union[str, Path]) -> Optional[DeploymentState]:
    path = get_deployment_state_path(repo_dir)
    try:
        with open(path) as f:
            data = json.load(f)
    except FileNotFoundError:
        return None
    except (OSError, ValueError) as e:
        log.warning(f"Ignoring unreadable deployment state file {path}: {e}")
        return None

    if not isinstance(data, dict):
        log.warning(f"Ignoring deployment state file {path}, expected a JSON object")
        return None

    known = {f.name for f in fields(DeploymentState)}
    return DeploymentState(**{k: v for k, v in data.items() if k in known and isinstance(v, str)})


def write_deployment_state(repo_dir: Union[str, Path], state: DeploymentState) -> Path:
    path = get_deployment_state_path(repo_dir)
    path.parent.mkdir(parents=True, exist_ok=True)

    with file_lock_context(str(path.parent / consts.DEPLOYMENT_STATE_LOCK_FILE)):
        with open(path, "w") as f:
            json.dump(asdict(state), f, indent=2)

    log.info(f"Saved deployment state to {path}: {state}")
    return path
