# ruff: noqa: T201

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from webtrust import __version__
from webtrust.adapters.stix import identity_id
from webtrust.app import open_web_content_client
from webtrust.config import ConfigurationError, configure_logging, level_for
from webtrust.domain.errors import InvalidContentError
from webtrust.domain.model import Content, ContentType

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from webtrust.domain.model import Indicator, Observable, WebContentStatus

log = logging.getLogger(__name__)

COMMANDS = ("status", "block", "unblock", "trust", "untrust")


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage the reputation of web content in OpenCTI")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for command in COMMANDS:
        sub = subparsers.add_parser(command, help=f"{command.capitalize()} a piece of web content")
        sub.add_argument(
            "type",
            choices=[content_type.value for content_type in ContentType],
            help="Observable type of the content",
        )
        sub.add_argument("value", help="Domain name, IP address or URL")
        if command != "status":
            sub.add_argument(
                "--creator",
                type=str,
                help="Organization name recorded as the author (defaults to config)",
            )

    return parser.parse_args(list(argv))


def _describe_status(content: Content, status: WebContentStatus) -> str:
    if status.actor is None:
        return f"{content}: {status.status}"
    actor = status.actor.name or status.actor.standard_id
    return f"{content}: {status.status} (by {actor})"


def _describe_record(content: Content, command: str, record: Indicator | Observable | None) -> str:
    if record is None:
        return f"{content}: nothing to {command}"
    return f"{content}: {command} -> {record.standard_id}"


async def run_command(args: argparse.Namespace) -> str:
    content = Content(ContentType(args.type), args.value)
    creator = identity_id(args.creator) if getattr(args, "creator", None) else None

    async with open_web_content_client() as client:
        match args.command:
            case "status":
                return _describe_status(content, await client.get_status(content))
            case "block":
                return _describe_record(content, "block", await client.block(content, creator))
            case "unblock":
                return _describe_record(content, "unblock", await client.unblock(content, creator))
            case "trust":
                return _describe_record(content, "trust", await client.trust(content, creator))
            case "untrust":
                return _describe_record(content, "untrust", await client.untrust(content, creator))
            case _:
                raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=level_for(verbose=parsed_args.verbose))

    try:
        summary = asyncio.run(run_command(parsed_args))
    except (InvalidContentError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)
    except Exception:
        log.exception("Failed to %s %s", parsed_args.command, parsed_args.value)
        sys.exit(1)

    print(summary)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def cli() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    cli()
