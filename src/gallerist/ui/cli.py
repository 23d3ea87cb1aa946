from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from gallerist.adapters.sqlalchemy.unit_of_work import startup
from gallerist.app import load_galleries, reconcile_into_database, reconcile_json_store
from gallerist.config import (
    ConfigurationError,
    configure_logging,
    get_reconcile_config,
    get_storage_config,
)
from gallerist.domain.reconciliation import Reconciler

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Reconcile partial gallery records")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every merged field",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    merge = subparsers.add_parser("merge", help="Reconcile documents into the JSON store")
    merge.add_argument(
        "incoming",
        nargs="+",
        type=Path,
        help="Gallery store documents to merge, in order of observation",
    )
    merge.add_argument(
        "--store",
        type=Path,
        help="Target store document (defaults to the data directory)",
    )

    import_ = subparsers.add_parser("import", help="Reconcile documents into the database")
    import_.add_argument(
        "incoming",
        nargs="+",
        type=Path,
        help="Gallery store documents to import, in order of observation",
    )
    import_.add_argument(
        "--database-uri",
        type=str,
        help="SQLAlchemy database URI (defaults to config)",
    )

    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args: argparse.Namespace
    try:
        parsed_args = _parse_args(args_list)
        configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)
        reconciler = Reconciler.from_config(get_reconcile_config())
    except (ValueError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command == "merge":
            store_path = parsed_args.store or get_storage_config().store_path()
            reconcile_json_store(store_path, parsed_args.incoming, reconciler=reconciler)
        elif parsed_args.command == "import":
            startup(database_uri=parsed_args.database_uri)
            reconcile_into_database(load_galleries(parsed_args.incoming), reconciler=reconciler)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error during reconcile")
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
