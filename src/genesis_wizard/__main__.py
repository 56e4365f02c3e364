"""
Genesis wizard CLI entry point.

Build, import, edit and export the genesis specification of a private
network interactively.

Usage::

    python -m genesis_wizard --network devnet
    python -m genesis_wizard --network devnet --workdir ./networks
    python -m genesis_wizard --network devnet --service bootnode --service ethstats

Options:
    --network   Name of the network to manage (required)
    --workdir   Directory holding persisted sessions (default: $GENESIS_WIZARD_HOME)
    --service   Name of a deployed service depending on the genesis (can be repeated)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from genesis_wizard import config
from genesis_wizard.prompt import ConsolePrompter
from genesis_wizard.session import Session
from genesis_wizard.types import GenesisWizardError
from genesis_wizard.wizard import Wizard

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name so errors stand out between prompts."""

    LEVEL_COLORS = {
        logging.DEBUG: "\x1b[2m",
        logging.INFO: "\x1b[32m",
        logging.WARNING: "\x1b[33m",
        logging.ERROR: "\x1b[31m",
    }
    RESET = "\x1b[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno, self.LEVEL_COLORS[logging.ERROR])
        # Records are shared between handlers, so color a copy.
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname:<8}{self.RESET}"
        return super().format(record)


def setup_logging(verbose: bool = False, no_color: bool = False) -> None:
    """Send log records to stderr, keeping stdout for the wizard's questions."""
    level = logging.DEBUG if verbose else logging.INFO
    formatter_cls = logging.Formatter if no_color else ColoredFormatter

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(formatter_cls(LOG_FORMAT, datefmt=LOG_DATEFMT))

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Genesis specification wizard",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--network",
        required=True,
        help="Name of the network to manage",
    )
    parser.add_argument(
        "--workdir",
        type=Path,
        default=config.WIZARD_HOME,
        help=f"Directory holding persisted sessions (default: {config.WIZARD_HOME})",
    )
    parser.add_argument(
        "--service",
        action="append",
        default=[],
        dest="services",
        help="Deployed service depending on the genesis (can be repeated)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored logging output",
    )

    args = parser.parse_args(argv)

    setup_logging(args.verbose, args.no_color)

    if not args.network or any(c in args.network for c in "/\\ "):
        logger.error("Invalid network name: %r", args.network)
        return 1

    try:
        session = Session.load(args.network, args.workdir)
    except GenesisWizardError as e:
        logger.error("Failed to load session: %s", e.message)
        return 1
    session.services.update(args.services)

    try:
        Wizard(session, ConsolePrompter()).run()
    except KeyboardInterrupt:
        logger.info("Shutting down...")
    return 0


if __name__ == "__main__":
    sys.exit(main())
