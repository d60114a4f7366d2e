import argparse
import sys

from capi_test_infra.test_infra.exceptions import PrerequisiteError
from capi_test_infra.test_infra.utils import get_env
from consts import env_defaults

from .azure_cleanup import clean_azure_resources, log


def _get_parsed_args(args=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Clean up Azure resources created during ARO-CAPZ testing. Resources that are not tied to the "
        "test resource group can survive its deletion.",
        epilog="Deletions are asynchronous, run again to verify the cleanup is complete.",
    )
    parser.add_argument(
        "--prefix",
        help="Resource name prefix to search for (default: CAPZ_USER or 'rcap')",
        type=str,
        default=get_env("CAPZ_USER", env_defaults.DEFAULT_CLEANUP_PREFIX),
    )
    parser.add_argument("--dry-run", help="Show what would be deleted without deleting", action="store_true")
    parser.add_argument("--force", help="Skip confirmation prompts", action="store_true")
    return parser.parse_args(args)


def main(args=None) -> int:
    log.info("===== AZURE RESOURCE CLEANUP =====")
    p_args = _get_parsed_args(args)

    try:
        summary = clean_azure_resources(p_args.prefix, dry_run=p_args.dry_run, force=p_args.force)
    except PrerequisiteError as e:
        log.error(str(e))
        return 1

    log.info("===== AZURE RESOURCE CLEANUP DONE =====")
    if summary and summary.failed:
        log.warning(f"{summary.failed} deletion(s) failed, rerun the cleanup to retry them")
    return 0


if __name__ == "__main__":
    sys.exit(main())
