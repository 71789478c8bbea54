"""Command-line interface for roku-remote."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

from . import constants
from .adapters import IconStore, RokuClient
from .config import RemoteConfig, load_config
from .errors import RokuError
from .logging import configure_logging

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roku-remote", description="Drive a Roku device over its control protocol"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=constants.DEFAULT_CONFIG_PATH,
        help=f"Path to configuration file (default: {constants.DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "--url", help="Device base address, e.g. http://192.168.1.61:8060"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("apps", help="List installed apps")
    subparsers.add_parser("active", help="Show the active app")
    subparsers.add_parser("info", help="Show device information")

    keypress_parser = subparsers.add_parser("keypress", help="Press one or more keys")
    keypress_parser.add_argument("keys", nargs="+", help="Key names or single characters")

    keydown_parser = subparsers.add_parser("keydown", help="Press and hold a key")
    keydown_parser.add_argument("key")

    keyup_parser = subparsers.add_parser("keyup", help="Release a held key")
    keyup_parser.add_argument("key")

    launch_parser = subparsers.add_parser("launch", help="Launch an app by id")
    launch_parser.add_argument("app_id")

    text_parser = subparsers.add_parser("text", help="Type literal text")
    text_parser.add_argument("text")

    icon_parser = subparsers.add_parser("icon", help="Download an app icon")
    icon_parser.add_argument("app_id")
    icon_parser.add_argument(
        "--directory", type=Path, help="Directory to write the icon to"
    )

    subparsers.add_parser(
        "show-config", help="Print the resolved configuration and exit"
    )

    return parser


async def run_command(client: RokuClient, args: argparse.Namespace) -> None:
    if args.command == "apps":
        for app in await client.apps():
            print(f"{app.id}\t{app.name}\t{app.type}\t{app.version}")
    elif args.command == "active":
        app = await client.active()
        print("No active app" if app is None else f"{app.id}\t{app.name}")
    elif args.command == "info":
        for key, value in (await client.info()).items():
            print(f"{key}: {value}")
    elif args.command == "keypress":
        chain = client.command()
        for key in args.keys:
            chain.keypress(key)
        await chain.send()
    elif args.command == "keydown":
        await client.keydown(args.key)
    elif args.command == "keyup":
        await client.keyup(args.key)
    elif args.command == "launch":
        await client.launch(args.app_id)
    elif args.command == "text":
        await client.text(args.text)
    elif args.command == "icon":
        print(await client.icon(args.app_id, args.directory))
    else:
        raise ValueError(f"Unknown command: {args.command}")


async def _run(config: RemoteConfig, args: argparse.Namespace) -> None:
    client = RokuClient(
        args.url or config.device.url,
        icon_store=IconStore(config.icons.directory),
        timeout=config.device.timeout_seconds,
    )
    async with client:
        await run_command(client, args)


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = load_config(args.config)
    configure_logging(
        config.logging.level,
        log_path=config.logging.path,
        log_network=config.logging.log_network,
    )

    if args.command == "show-config":
        print(f"Configuration loaded from {config.path!s}\n")
        for section in config.raw.sections():
            print(f"[{section}]")
            for key, value in config.raw[section].items():
                print(f"{key} = {value}")
            print()
        return 0

    try:
        asyncio.run(_run(config, args))
    except RokuError as exc:
        LOGGER.error("%s failed: %s", args.command, exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
