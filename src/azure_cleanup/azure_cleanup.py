import json
import re
import shlex
import shutil
from dataclasses import dataclass
from typing import Callable, List, Optional

from retry import retry
from tabulate import tabulate

from capi_test_infra.logger import log
from capi_test_infra.test_infra import utils
from capi_test_infra.test_infra.exceptions import PrerequisiteError

NAME_COLUMN_WIDTH = 60
TYPE_COLUMN_WIDTH = 50
RESOURCE_GROUP_COLUMN_WIDTH = 30


@dataclass(frozen=True)
class AzureResource:
    id: str
    name: str
    type: str
    resource_group: str

    @classmethod
    def from_graph_row(cls, row: dict) -> "AzureResource":
        return cls(
            id=row.get("id", ""),
            name=row.get("name", ""),
            type=row.get("type", ""),
            resource_group=row.get("resourceGroup", ""),
        )


@dataclass
class DeletionSummary:
    initiated: int = 0
    failed: int = 0
    skipped: int = 0


def _az(args: str):
    return utils.run_command(f"az {args}", raise_errors=False)


def check_prerequisites() -> None:
    log.info("Checking prerequisites...")

    if shutil.which("az") is None:
        raise PrerequisiteError(
            "Azure CLI (az) is not installed, see https://docs.microsoft.com/en-us/cli/azure/install-azure-cli"
        )

    _, _, returncode = _az("account show")
    if returncode != 0:
        raise PrerequisiteError("Not logged in to Azure CLI, run 'az login' to authenticate")

    _, _, returncode = _az("extension show --name resource-graph")
    if returncode != 0:
        log.warning("Azure Resource Graph extension not installed, installing resource-graph extension...")
        utils.run_command("az extension add --name resource-graph --yes")

    log.info("Prerequisites check passed")


def _kql_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def build_query(prefix: str) -> str:
    return (
        f"Resources | where name contains {_kql_string(prefix)} "
        "| project id, name, type, resourceGroup, subscriptionId | order by type asc, name asc"
    )


@retry(exceptions=RuntimeError, tries=3, delay=5, logger=log)
def find_resources(prefix: str) -> List[AzureResource]:
    log.info(f"Searching for Azure resources with prefix '{prefix}'...")
    out, _, _ = utils.run_command(f"az graph query -q {shlex.quote(build_query(prefix))} -o json")

    try:
        result = json.loads(out) if out else {}
    except ValueError:
        log.warning(f"Unexpected resource graph output: {out}")
        return []

    if not isinstance(result, dict):
        return []

    rows = result.get("data") or []
    return [AzureResource.from_graph_row(row) for row in rows]


def format_resources_table(resources: List[AzureResource]) -> str:
    rows = [
        (
            r.name[:NAME_COLUMN_WIDTH],
            r.type[:TYPE_COLUMN_WIDTH],
            r.resource_group[:RESOURCE_GROUP_COLUMN_WIDTH],
        )
        for r in resources
    ]
    return tabulate(rows, headers=["NAME", "TYPE", "RESOURCE GROUP"])


def deletion_order(resources: List[AzureResource]) -> List[AzureResource]:
    """Reverse type order, dependent resources (e.g. identities) go before the networks they use"""
    return list(reversed(sorted(resources, key=lambda r: r.type)))


def resource_exists(resource_id: str) -> bool:
    # Resource Graph may return stale data
    _, _, returncode = _az(f"resource show --ids {shlex.quote(resource_id)}")
    return returncode == 0


def delete_resources(resources: List[AzureResource]) -> DeletionSummary:
    """Fire-and-forget deletion, a failed resource never stops the batch"""
    summary = DeletionSummary()

    for resource in deletion_order(resources):
        if not resource.id:
            continue

        name = resource.id.rstrip("/").rsplit("/", 1)[-1]
        if not resource_exists(resource.id):
            log.info(f"Deleting: {name}... SKIPPED (not found)")
            summary.skipped += 1
            continue

        _, err, returncode = _az(f"resource delete --ids {shlex.quote(resource.id)} --no-wait")
        if returncode == 0:
            log.info(f"Deleting: {name}... INITIATED")
            summary.initiated += 1
        else:
            log.error(f"Deleting: {name}... FAILED {err}")
            summary.failed += 1

    log.info(
        f"Deletion summary: initiated: {summary.initiated}, failed: {summary.failed}, "
        f"skipped (not found): {summary.skipped}"
    )
    if summary.initiated > 0:
        log.warning("Deletions run asynchronously, resources may take a few minutes to be fully removed")
        log.info("Run the cleanup again to verify it is complete")

    return summary


def confirm_deletion(count: int, input_func: Callable[[str], str] = input) -> bool:
    try:
        reply = input_func(f"Delete all {count} resource(s)? [y/N] ")
    except EOFError:
        # stdin closed, e.g. CI without --force
        return False
    return re.fullmatch(r"[Yy]", reply.strip()) is not None


def clean_azure_resources(
    prefix: str, dry_run: bool = False, force: bool = False, input_func: Callable[[str], str] = input
) -> Optional[DeletionSummary]:
    """
    Find Azure resources whose name contains `prefix` and delete them.
    :return: the deletion summary, None when nothing was deleted (no resources, dry run or cancelled)
    :raises PrerequisiteError: when az is missing or not logged in
    """
    log.info(f"Resource prefix: {prefix}")
    if dry_run:
        log.warning("DRY-RUN mode enabled - no resources will be deleted")

    check_prerequisites()

    resources = find_resources(prefix)
    if not resources:
        log.info(f"No resources found matching prefix '{prefix}', no cleanup needed")
        return None

    log.warning(f"Found {len(resources)} resource(s) matching prefix '{prefix}':\n{format_resources_table(resources)}")

    if dry_run:
        log.warning(f"[DRY-RUN] Would delete {len(resources)} resource(s)")
        return None

    if not force and not confirm_deletion(len(resources), input_func):
        log.info("Deletion cancelled")
        return None

    return delete_resources(resources)
