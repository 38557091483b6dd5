"""Command-line entrypoint that prints the resolved settings."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence

from azsettings import __version__
from azsettings.errors import AzureSettingsError
from azsettings.logging_utils import configure_logging
from azsettings.resolver import read_settings
from azsettings.sources import ConfigSource, EnvironmentSource, FileSource
from azsettings.utils.masking import redact_sensitive_fields


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="azsettings",
        description="Resolve Azure authentication settings and print them as JSON.",
    )
    parser.add_argument(
        "--source",
        choices=("auto", "env", "file"),
        default="auto",
        help="auto uses the default chain; env and file read a single source",
    )
    parser.add_argument("--file", help="YAML settings file (required for --source file)")
    parser.add_argument(
        "--show-secrets",
        action="store_true",
        help="Print secret values instead of masking them",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _select_sources(args: argparse.Namespace) -> list[ConfigSource] | None:
    if args.source == "env":
        return [EnvironmentSource()]
    if args.source == "file":
        return [FileSource(args.file)]
    if args.file:
        return [FileSource(args.file), EnvironmentSource()]
    return None


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.source == "file" and not args.file:
        parser.error("--file is required with --source file")

    try:
        configure_logging()
    except RuntimeError as exc:
        print(f"error [invalid_config]: {exc}", file=sys.stderr)
        return 2

    try:
        settings = read_settings(sources=_select_sources(args))
    except AzureSettingsError as exc:
        print(f"error [{exc.code}]: {exc}", file=sys.stderr)
        return 1

    payload: object = settings.model_dump()
    if not args.show_secrets:
        payload = redact_sensitive_fields(payload)
    print(json.dumps(payload, indent=2, sort_keys=True))
    return 0
