"""Entry point for the job application tracker."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from filelock import FileLock, Timeout
from pydantic import ValidationError as ConfigValidationError

from .cli import Menu
from .config import get_config, load_config
from .errors import StorageError
from .service import RecordService
from .store import ApplicationStore


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the application."""
    config = get_config()
    config.log_dir.mkdir(parents=True, exist_ok=True)
    log_file = config.log_dir / "app.log"

    level = getattr(logging, config.log_level.upper(), logging.INFO)
    if verbose:
        level = logging.DEBUG

    # The console only gets warnings so the menu stays readable
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.WARNING)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.FileHandler(log_file),
            console,
        ],
    )


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line flags."""
    parser = argparse.ArgumentParser(
        description="Track job applications in a local SQLite database",
    )
    parser.add_argument(
        "--config", "-c", type=Path, default=None,
        help="Path to config YAML (default: config/config.yaml if present)",
    )
    parser.add_argument(
        "--db", type=Path, default=None,
        help="SQLite database file (overrides db_path from config)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def run_session(db_path: Path) -> int:
    """Open the store and run the menu until the user exits."""
    logger = logging.getLogger(__name__)

    try:
        store = ApplicationStore(db_path).open()
        store.create_schema()
    except StorageError as e:
        logger.error(f"Cannot open database: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        Menu(RecordService(store)).run()
    finally:
        store.close()

    logger.info("Session finished")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point with single-session protection."""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
        setup_logging(args.verbose)
    except (FileNotFoundError, ConfigValidationError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    logger = logging.getLogger(__name__)
    db_path = args.db or config.db_path
    lock_file = Path(f"{db_path}.lock")
    lock_file.parent.mkdir(parents=True, exist_ok=True)

    try:
        with FileLock(lock_file, timeout=config.lock_timeout):
            logger.info(f"Acquired lock, opening {db_path}")
            return run_session(db_path)

    except Timeout:
        logger.warning("Could not acquire lock - another session is using the database")
        print(f"Error: {db_path} is in use by another session.", file=sys.stderr)
        return 1

    except Exception as e:
        logger.exception(f"Session failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
