# src/nemid/app.py
"""
Application Entry Point - Command-line Interface

This module serves as the composition root for the nemid command-line tool.
It loads settings, configures logging and exposes the identity operations
as subcommands:

    nemid mosaic-id nem:xem
    nemid network 0x9003
    nemid network-name mijin_test
    nemid version --network MAIN_NET 3
    nemid xem 5 --relative

Files that USE this module:
- nemid.__main__ (python -m nemid)
- pyproject.toml (nemid console script)

Files that this module USES:
- nemid.shared.logging_conf (setup_logging for logging configuration)
- nemid.config (settings for default network and logging)
- nemid.application.mosaic_ids (name to id derivation, XEM helpers)
- nemid.domain (network extraction and domain errors)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import argparse  # Command-line argument parsing
import logging  # Standard library for logging messages and errors
import sys  # Standard streams and argv
from typing import List, Optional

from nemid.application.mosaic_ids import mosaic_id_from_full_name, xem, xem_relative
from nemid.config import settings
from nemid.domain.errors import DomainError
from nemid.domain.network import (
    NetworkType,
    extract_network_type,
    network_type_from_string,
    version_for_network,
)
from nemid.shared.logging_conf import setup_logging

logger = logging.getLogger(__name__)


def _parse_int(text: str) -> int:
    """Parse a decimal (leading zeros allowed) or 0x-prefixed hex integer."""
    try:
        if text[:2].lower() == "0x":
            return int(text[2:], 16)
        return int(text, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}")


def _describe_network(network: NetworkType) -> str:
    return f"{network.name} {int(network)}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="nemid", description="Mosaic identity and network tools")
    commands = parser.add_subparsers(dest="command", required=True)

    mosaic_id = commands.add_parser("mosaic-id", help="Derive the id of a namespace:mosaic name")
    mosaic_id.add_argument("name", help="Full mosaic name, e.g. nem:xem")

    network = commands.add_parser("network", help="Extract the network from a version field")
    network.add_argument("version", type=_parse_int, help="Version value (decimal or 0x hex)")

    network_name = commands.add_parser("network-name", help="Resolve a network name")
    network_name.add_argument("name", help="MIJIN, MIJIN_TEST, TEST_NET or MAIN_NET")

    version = commands.add_parser("version", help="Pack a network and transaction version")
    version.add_argument("tx_version", type=_parse_int, help="Transaction version (0-255)")
    version.add_argument("--network", default=None, help="Network name (default: NEMID_NETWORK_TYPE)")

    xem_cmd = commands.add_parser("xem", help="Build a XEM mosaic")
    xem_cmd.add_argument("amount", type=_parse_int, help="Amount in micro-XEM")
    xem_cmd.add_argument("--relative", action="store_true", help="Treat amount as whole XEM")

    return parser


def run(args: argparse.Namespace) -> str:
    """Execute a parsed command and return its output line."""
    if args.command == "mosaic-id":
        mosaic_id = mosaic_id_from_full_name(args.name)
        return f"{mosaic_id} {mosaic_id.to_hex()}"

    if args.command == "network":
        return _describe_network(extract_network_type(args.version))

    if args.command == "network-name":
        return _describe_network(network_type_from_string(args.name))

    if args.command == "version":
        network = network_type_from_string(args.network) if args.network else settings.network
        if network is NetworkType.NOT_SUPPORTED_NET:
            raise ValueError(f"unsupported network: {args.network}")
        return str(version_for_network(network, args.tx_version))

    if args.command == "xem":
        mosaic = xem_relative(args.amount) if args.relative else xem(args.amount)
        return str(mosaic)

    raise ValueError(f"unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse arguments, run one command and print its result.

    Only the result line is written to stdout; log records and error
    messages go to stderr.

    Returns:
        0 on success, 1 when the input is rejected
    """
    setup_logging(
        level=settings.log_level_value,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
        log_to_console=settings.log_console,
        stream=sys.stderr,
    )

    args = build_parser().parse_args(argv)
    try:
        output = run(args)
    except (DomainError, ValueError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
