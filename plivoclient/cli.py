"""plivoclient CLI entry point.

Usage:
    plivoclient init [--output plivo.yaml]
    plivoclient account [--config plivo.yaml]
    plivoclient invoke get_number number=14155550100 [--config plivo.yaml]
    plivoclient invoke make_bulk_call from=14155550100 answer_url=https://example.com/answer \
        dest=14155550101 dest=14155550102:X-PH-Test=1
    plivoclient operations
    plivoclient verbs
"""

from __future__ import annotations

import argparse
import inspect
import sys
from pathlib import Path

from loguru import logger

from plivoclient.config import ClientConfig, load_config
from plivoclient.exceptions import PlivoError
from plivoclient.rest.client import RestAPI
from plivoclient.rest.models import PlivoResponse

# RestAPI attributes that are not remote operations
_NON_OPERATIONS = {"close", "from_config"}


def _load(config_path: str) -> ClientConfig:
    """Load the config file if present, else fall back to PLIVO_* variables."""
    if Path(config_path).exists():
        config = load_config(config_path)
    else:
        logger.debug(f"Config file not found: {config_path}, using environment")
        config = ClientConfig.from_env()

    logger.remove()
    logger.add(sys.stderr, level=config.logging.level)

    if not config.has_credentials:
        logger.error("No credentials configured (auth_id/auth_token or PLIVO_AUTH_ID/PLIVO_AUTH_TOKEN)")
        sys.exit(1)
    return config


def build_client(config: ClientConfig) -> RestAPI:
    return RestAPI.from_config(config)


def operations() -> list[str]:
    """Names of all public RestAPI operations."""
    return sorted(
        name
        for name, _ in inspect.getmembers(RestAPI, inspect.isfunction)
        if not name.startswith("_") and name not in _NON_OPERATIONS
    )


def _print_record(record: PlivoResponse) -> None:
    print(record.model_dump_json(indent=2, by_alias=True, exclude_none=True))
    if not record.ok:
        logger.error(f"Request failed: {record.error}")
        sys.exit(1)


def _parse_params(pairs: list[str]) -> dict[str, str]:
    params: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            logger.error(f"Invalid parameter '{pair}', expected key=value")
            sys.exit(2)
        params[key] = value
    return params


def _split_destinations(pairs: list[str]) -> tuple[dict[str, str], list[str]]:
    """Pull repeated ``dest=<number>[:<sip_headers>]`` pairs out of ``pairs``."""
    destinations: dict[str, str] = {}
    rest: list[str] = []
    for pair in pairs:
        if not pair.startswith("dest="):
            rest.append(pair)
            continue
        number, _, headers = pair[len("dest="):].partition(":")
        if not number:
            logger.error(f"Invalid destination '{pair}', expected dest=<number>[:<sip_headers>]")
            sys.exit(2)
        destinations[number] = headers
    return destinations, rest


def cmd_init(args: argparse.Namespace) -> None:
    """Generate a starter configuration file."""
    output = Path(args.output)

    if output.exists() and not args.force:
        logger.error(f"File already exists: {output}. Use --force to overwrite.")
        sys.exit(1)

    from plivoclient.config import DEFAULT_CONFIG_YAML

    output.write_text(DEFAULT_CONFIG_YAML)
    print(f"Configuration written to: {output}")
    print(f"\nEdit the file and run: plivoclient account --config {output}")


def cmd_account(args: argparse.Namespace) -> None:
    """Print the account details."""
    config = _load(args.config)
    with build_client(config) as api:
        record = api.get_account()
    _print_record(record)


def cmd_invoke(args: argparse.Namespace) -> None:
    """Call any REST operation with key=value parameters."""
    if args.method not in operations():
        logger.error(f"Unknown operation: {args.method}. Run 'plivoclient operations'.")
        sys.exit(2)

    pairs = args.params
    destinations: dict[str, str] = {}
    if args.method == "make_bulk_call":
        destinations, pairs = _split_destinations(pairs)
    params = _parse_params(pairs)
    config = _load(args.config)
    with build_client(config) as api:
        method = getattr(api, args.method)
        try:
            if args.method == "make_bulk_call":
                record = method(params, destinations)
            elif inspect.signature(method).parameters.get("params") is None:
                record = method()
            else:
                record = method(params)
        except PlivoError as e:
            logger.error(str(e))
            sys.exit(1)
    _print_record(record)


def cmd_operations(args: argparse.Namespace) -> None:
    """List available REST operations."""
    names = operations()
    print("\nAvailable REST operations:")
    print("=" * 40)
    for name in names:
        print(f"  {name}")
    print(f"\nTotal: {len(names)} operations")
    print()


def cmd_verbs(args: argparse.Namespace) -> None:
    """List XML elements and the children each one accepts."""
    from plivoclient.xml.registry import element_registry

    tags = element_registry.available
    print("\nAvailable XML elements:")
    print("=" * 40)
    for tag in tags:
        nestables = ", ".join(sorted(element_registry.get(tag).nestables)) or "-"
        print(f"  {tag:<12} children: {nestables}")
    print(f"\nTotal: {len(tags)} elements")
    print()


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="plivoclient",
        description="plivoclient - Plivo REST API client and XML builder",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # `plivoclient init`
    init_parser = subparsers.add_parser("init", help="Generate a starter config file")
    init_parser.add_argument(
        "--output", "-o",
        default="plivo.yaml",
        help="Output file path (default: plivo.yaml)",
    )
    init_parser.add_argument(
        "--force", "-f",
        action="store_true",
        help="Overwrite existing file",
    )

    # `plivoclient account`
    account_parser = subparsers.add_parser("account", help="Show account details")
    account_parser.add_argument(
        "--config", "-c",
        default="plivo.yaml",
        help="Path to the YAML config file (default: plivo.yaml)",
    )

    # `plivoclient invoke`
    invoke_parser = subparsers.add_parser("invoke", help="Call a REST operation")
    invoke_parser.add_argument("method", help="Operation name, e.g. get_number")
    invoke_parser.add_argument(
        "params",
        nargs="*",
        help="Parameters as key=value; make_bulk_call also takes dest=<number>[:<sip_headers>]",
    )
    invoke_parser.add_argument(
        "--config", "-c",
        default="plivo.yaml",
        help="Path to the YAML config file (default: plivo.yaml)",
    )

    # `plivoclient operations`
    subparsers.add_parser("operations", help="List available REST operations")

    # `plivoclient verbs`
    subparsers.add_parser("verbs", help="List XML elements and allowed children")

    args = parser.parse_args(argv)

    if args.command == "init":
        cmd_init(args)
    elif args.command == "account":
        cmd_account(args)
    elif args.command == "invoke":
        cmd_invoke(args)
    elif args.command == "operations":
        cmd_operations(args)
    elif args.command == "verbs":
        cmd_verbs(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
