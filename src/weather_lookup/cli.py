"""Command-line entry point: manage provider credentials and look up weather."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from . import __version__
from .commands import Command, GetWeather, ProviderAdd, ProviderRemove, ProviderShow
from .config import load_settings
from .exceptions import ConfigError, ProviderStoreError
from .log_setup import setup_logger
from .models import PROVIDER_KIND_SLUGS, ProviderRecord
from .processor import ProductionDependencyFactory, Processor
from .redaction import sanitize_text


def _non_empty(value: str) -> str:
    if not value:
        raise argparse.ArgumentTypeError("empty values are not allowed")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Build the `weather` argument parser."""
    parser = argparse.ArgumentParser(
        prog="weather",
        description="Look up current weather through configured provider credentials.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    commands = parser.add_subparsers(dest="command", required=True)

    provider = commands.add_parser(
        "provider", help="Configure credentials for the weather provider."
    )
    provider_commands = provider.add_subparsers(dest="provider_command", required=True)

    add = provider_commands.add_parser("add", help="Add weather provider.")
    add.add_argument("-n", "--name", type=_non_empty, required=True, help="Provider name.")
    add.add_argument(
        "-p",
        "--provider",
        choices=sorted(PROVIDER_KIND_SLUGS),
        required=True,
        help="Weather API the credentials belong to.",
    )
    add.add_argument(
        "-a", "--api-key", type=_non_empty, required=True, help="Provider API key."
    )

    remove = provider_commands.add_parser("remove", help="Remove weather provider.")
    remove.add_argument("-n", "--name", type=_non_empty, required=True, help="Provider name.")

    show = provider_commands.add_parser(
        "show", help="Show one weather provider, or all of them when --name is omitted."
    )
    show.add_argument("-n", "--name", type=_non_empty, default=None, help="Provider name.")

    get = commands.add_parser("get", help="Show the weather for the provided address.")
    get.add_argument("address", type=_non_empty, help="City or address to get the weather for.")
    get.add_argument(
        "-d",
        "--date",
        type=_non_empty,
        default=None,
        help="Date to get the weather for (default is current time).",
    )
    get.add_argument(
        "-p",
        "--provider-name",
        type=_non_empty,
        required=True,
        help="Name of the configured provider to use.",
    )
    return parser


def parse_command(argv: Sequence[str] | None = None) -> Command:
    """Parse CLI arguments into a command value."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "get":
        return GetWeather(address=args.address, provider_name=args.provider_name, date=args.date)
    if args.provider_command == "add":
        try:
            record = ProviderRecord(
                name=args.name,
                kind=PROVIDER_KIND_SLUGS[args.provider],
                api_key=args.api_key,
            )
        except ValidationError as exc:
            parser.error(f"invalid provider: {exc.errors()[0]['msg']}")
        return ProviderAdd(record=record)
    if args.provider_command == "remove":
        return ProviderRemove(name=args.name)
    return ProviderShow(name=args.name)


def main(argv: Sequence[str] | None = None) -> int:
    """Run one weather command and return the process exit code."""
    command = parse_command(argv)
    console = Console()

    try:
        settings = load_settings()
    except ConfigError as exc:
        console.print(f"[red]Configuration failure:[/red] {escape(sanitize_text(str(exc)))}")
        return 2

    logger = setup_logger(level=settings.log_level)
    processor = Processor(
        ProductionDependencyFactory(settings, logger=logger),
        console=console,
        logger=logger,
    )
    try:
        processor.run(command)
    except ProviderStoreError as exc:
        logger.info("Command failed: %s", exc, extra={"command": type(command).__name__})
        console.print(escape(sanitize_text(str(exc))))
        return 1
    except Exception as exc:
        logger.exception(
            "Unexpected weather CLI failure: %s", exc, extra={"command": type(command).__name__}
        )
        console.print(f"Unexpected failure: {escape(sanitize_text(str(exc)))}")
        return 99
    return 0


if __name__ == "__main__":
    sys.exit(main())
