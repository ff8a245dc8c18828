"""CLI entry point."""

from __future__ import annotations

import argparse
import logging
import os
from typing import Sequence

from .core import ConfigError, load_config

LOGGER = logging.getLogger(__name__)


def cli(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        prog="toastr",
        description="Toastr - chat command channels backed by a live config store",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    check_parser = subparsers.add_parser(
        "check-config",
        help="Load the configuration and print what each channel will use",
    )
    check_parser.add_argument(
        "--config-dir",
        default=None,
        help="Directory containing .env and channels.yaml (default: ~/.toastr)",
    )

    args = parser.parse_args(argv)
    _configure_logging()

    if args.command == "check-config":
        return _check_config(args.config_dir)
    parser.print_help()
    return 1


def run() -> None:
    raise SystemExit(cli())


def _configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    log_level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    log_level = getattr(logging, log_level_name, logging.INFO)
    logging.getLogger().setLevel(log_level)


def _check_config(config_dir: str | None) -> int:
    try:
        config = load_config(config_dir)
    except ConfigError as exc:
        LOGGER.error("Configuration error: %s", exc)
        return 1

    lines = [
        f"Bot user: {config.bot_username}",
        f"Store namespace: {config.store_namespace}",
        "Default prefixes: " + ", ".join(repr(prefix) for prefix in config.default_prefixes),
        "Roles: " + (", ".join(config.roles) or "(none)"),
        "Channels:",
    ]
    lines.extend(f"- {channel}" for channel in config.channels)
    print("\n".join(lines))
    return 0


if __name__ == "__main__":
    raise SystemExit(cli())
