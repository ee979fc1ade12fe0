"""Command-line entry point: ``bank-sim [SCRIPT]``.

Reads a command script from a file or stdin, writes one result line per
command to stdout and logs to stderr.
"""

import argparse
import sys
from pathlib import Path

from bank_sim import __version__
from bank_sim.commands import run_script
from bank_sim.config import LOG_FORMATS, LOG_LEVELS, BankSimConfig
from bank_sim.exceptions import BankSimError
from bank_sim.logging import get_logger, setup_logging
from bank_sim.sinks import ConsoleSink
from bank_sim.store import AccountRegistry

logger = get_logger(__name__)


def build_parser(config: BankSimConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bank-sim",
        description="Run a bank account command script.",
    )
    parser.add_argument(
        "script",
        nargs="?",
        type=Path,
        default=None,
        help="Command script to run (default: stdin)",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        default=config.log_level,
        help="Log level for stderr output (default: %(default)s)",
    )
    parser.add_argument(
        "--log-format",
        choices=LOG_FORMATS,
        default=config.log_format,
        help="Log format (default: %(default)s)",
    )
    parser.add_argument(
        "--unique-owners",
        action="store_true",
        default=config.unique_owners,
        help="Reject a Create for an owner that already has an account",
    )
    parser.add_argument(
        "--record-incoming",
        action="store_true",
        default=config.record_incoming_transfers,
        help="Add a ledger entry to the receiving account of a transfer",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    try:
        config = BankSimConfig.from_env()
    except BankSimError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    parser = build_parser(config)
    args = parser.parse_args(argv)
    if args.script is not None and not args.script.is_file():
        parser.error(f"script not found: {args.script}")
    setup_logging(level=args.log_level, format_type=args.log_format)

    sink = ConsoleSink()
    registry = AccountRegistry(
        sink=sink,
        unique_owners=args.unique_owners,
        record_incoming_transfers=args.record_incoming,
    )

    stream = args.script.open(encoding="utf-8") if args.script else sys.stdin
    try:
        processed = run_script(stream, registry)
    except BankSimError as e:
        logger.error("Script aborted: %s", e)
        return 1
    finally:
        if stream is not sys.stdin:
            stream.close()
        sink.close()

    logger.info("Processed %d commands; registry: %s", processed, registry.summary())
    return 0


if __name__ == "__main__":
    sys.exit(main())
