"""Command-line interface for staramr-updater."""

import argparse
import logging
import os
import sys
from typing import List, Optional

from staramr_updater.exceptions import StarAMRUpdaterError
from staramr_updater.output import entries_to_bytes, write_csv, write_tsv
from staramr_updater.report import read_summary
from staramr_updater.services.workflows import HttpWorkflowResolver
from staramr_updater.updater import build_entries

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="staramr-updater",
        description="Turn a staramr summary report into versioned sample metadata fields.",
    )
    parser.add_argument(
        "report",
        help="staramr summary report (staramr-summary.tsv)",
    )
    parser.add_argument(
        "--workflow-version", type=str, default=None,
        help="Pipeline version appended to every key (env: STARAMR_WORKFLOW_VERSION)",
    )
    parser.add_argument(
        "--workflow-id", type=str, default=None,
        help="Workflow id to resolve the version from the workflow registry instead",
    )
    parser.add_argument(
        "--workflow-api-url", type=str, default=None,
        help="Base URL of the workflow registry (env: STARAMR_WORKFLOW_API_URL)",
    )
    parser.add_argument(
        "-o", "--output", type=str, default="staramr_metadata.tsv",
        help="Output file path, '-' for stdout (default: staramr_metadata.tsv)",
    )
    parser.add_argument(
        "--format", choices=["tsv", "csv"], default="tsv", dest="fmt",
        help="Output format (default: tsv)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable verbose/debug logging",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    api_url = args.workflow_api_url or os.environ.get("STARAMR_WORKFLOW_API_URL")
    version = args.workflow_version
    if version is None and args.workflow_id is None:
        version = os.environ.get("STARAMR_WORKFLOW_VERSION")
    if version is None:
        if args.workflow_id is None:
            parser.error("No pipeline version. Supply --workflow-version or --workflow-id.")
        if not api_url:
            parser.error("--workflow-id needs --workflow-api-url (or STARAMR_WORKFLOW_API_URL).")

    try:
        if version is None:
            version = HttpWorkflowResolver(api_url).resolve_workflow_version(args.workflow_id)
        result = read_summary(args.report)
    except StarAMRUpdaterError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    entries = build_entries(result, version)

    if args.output == "-":
        sys.stdout.buffer.write(entries_to_bytes(entries, fmt=args.fmt))
        return
    if args.fmt == "csv":
        write_csv(entries, args.output)
    else:
        write_tsv(entries, args.output)

    logger.info("Wrote %d metadata fields for version %s", len(entries), version)
    print(f"Output: {args.output}")


if __name__ == "__main__":
    main()
