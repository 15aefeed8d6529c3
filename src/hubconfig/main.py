#!/usr/bin/env python3
"""hubconfig: download a JSON config from the hub and print its fields"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from .adapters.config_env import load_hub_settings
from .adapters.http import RequestsFetcher
from .config import config
from .core.config_view import ConfigView, resolve_key
from .core.errors import HubClientError
from .core.hub import Hub
from .core.json_value import JSONValue, is_object, thaw

EXIT_OK = 0
EXIT_FETCH_FAILED = 1
EXIT_NOT_FOUND = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hubconfig",
        description="Download a JSON config from the hub and read fields from it.",
    )
    parser.add_argument("repo_id", help="Repository id, e.g. bert-base-uncased")
    parser.add_argument("filename", nargs="?", default="config.json")
    parser.add_argument(
        "--get",
        metavar="PATH",
        help="Dotted member path to print, camelCase or snake_case (e.g. textConfig.hiddenSize)",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def resolve_path(view: ConfigView, path: str) -> JSONValue:
    """Follow a dotted member path and return the raw member it reaches.

    Raises:
        KeyError: a member along the path is missing or its parent is not an object
    """
    member: JSONValue = view.mapping
    for name in path.split("."):
        key = resolve_key(member, name) if is_object(member) else None
        if key is None:
            raise KeyError(path)
        member = member[key]
    return member


def format_member(member: JSONValue) -> str:
    if is_object(member):
        return "\n".join(member.keys())
    if isinstance(member, str):
        return member
    return json.dumps(thaw(member))


async def _download(repo_id: str, filename: str) -> ConfigView:
    with RequestsFetcher() as fetcher:
        return await Hub(fetcher, load_hub_settings()).download_config(repo_id, filename)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.debug or config.DEBUG else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        view = asyncio.run(_download(args.repo_id, args.filename))
    except HubClientError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FETCH_FAILED

    member: JSONValue = view.mapping
    if args.get:
        try:
            member = resolve_path(view, args.get)
        except KeyError:
            print(f"Not found: {args.get}", file=sys.stderr)
            return EXIT_NOT_FOUND

    print(format_member(member))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
