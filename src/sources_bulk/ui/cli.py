# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv
from pydantic import ValidationError

from sources_bulk.adapters.payload import parse_request
from sources_bulk.app import add_application_type, add_source_type, bulk_create
from sources_bulk.common.logging import configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from sources_bulk.domain.bulk import BulkCreateRequest

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create sources and their dependents in bulk")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log at DEBUG level",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    create = subparsers.add_parser("bulk-create", help="Create records from a JSON payload")
    create.add_argument(
        "payload",
        type=str,
        help="Path to the JSON payload, or '-' to read standard input",
    )

    types = subparsers.add_parser("types", help="Type catalog commands")
    types_sub = types.add_subparsers(dest="types_command", required=True)
    source_type = types_sub.add_parser("add-source-type", help="Register a source type")
    source_type.add_argument("--name", type=str, required=True, help="Unique type name")
    source_type.add_argument("--product-name", type=str, help="Human readable product name")
    source_type.add_argument("--vendor", type=str, help="Vendor of the product")

    application_type = types_sub.add_parser(
        "add-application-type", help="Register an application type"
    )
    application_type.add_argument("--name", type=str, required=True, help="Unique type name")
    application_type.add_argument("--display-name", type=str, help="Human readable name")

    return parser.parse_args(list(argv))


def _load_request(location: str) -> BulkCreateRequest:
    raw = sys.stdin.read() if location == "-" else Path(location).read_text(encoding="utf-8")
    try:
        request = parse_request(raw)
    except ValidationError as exc:
        raise ValueError(f"Invalid bulk payload: {exc}") from exc
    if request.is_empty():
        raise ValueError("Bulk payload contains no records")
    return request


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    request: BulkCreateRequest | None = None
    if parsed_args.command == "bulk-create":
        try:
            request = _load_request(parsed_args.payload)
        except (OSError, ValueError):
            log.exception("CLI validation error")
            sys.exit(2)
    types_command = getattr(parsed_args, "types_command", None)

    try:
        if request is not None:
            result = bulk_create(request)
            print(json.dumps(result.summary(), indent=2))
        elif types_command == "add-source-type":
            source_type = add_source_type(
                parsed_args.name,
                product_name=parsed_args.product_name,
                vendor=parsed_args.vendor,
            )
            print(source_type.id)
        elif types_command == "add-application-type":
            application_type = add_application_type(
                parsed_args.name,
                display_name=parsed_args.display_name,
            )
            print(application_type.id)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error during bulk create")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
