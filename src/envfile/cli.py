"""
Command line interface for inspecting and editing environment files.
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from .config import OUTPUT_FORMATS, CliConfig, ConfigError, load_config
from .store import EnvFile


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="envfile", description="Inspect and edit KEY=VALUE environment files")
    parser.add_argument(
        "--config",
        default=os.getenv("ENVFILE_CONFIG"),
        help="Optional YAML settings file (defaults to $ENVFILE_CONFIG)",
    )
    parser.add_argument(
        "--file",
        help="Environment file to operate on. Falls back to $ENVFILE_PATH, then the settings file, then .env",
    )
    parser.add_argument("--verbose", action="store_true", help="Print the resolved file and entry count to stderr")
    commands = parser.add_subparsers(dest="command", required=True)

    show = commands.add_parser("show", help="Print every entry in ascending key order")
    show.add_argument("--format", choices=OUTPUT_FORMATS, help="Output format (default from settings, else env)")

    get = commands.add_parser("get", help="Print the value of a single key")
    get.add_argument("key")

    set_ = commands.add_parser("set", help="Insert or update a key and write the file back")
    set_.add_argument("key")
    set_.add_argument("value")
    set_.add_argument("--dry-run", action="store_true", help="Print the result instead of writing it")

    unset = commands.add_parser("unset", help="Remove a key and write the file back")
    unset.add_argument("key")
    unset.add_argument("--dry-run", action="store_true", help="Print the result instead of writing it")

    fmt = commands.add_parser("fmt", help="Rewrite the file in canonical sorted form")
    fmt.add_argument("--check", action="store_true", help="Exit with status 1 if the file is not canonical")

    return parser.parse_args(argv)


def _resolve_path(args: argparse.Namespace, config: CliConfig) -> Path:
    return Path(args.file or os.getenv("ENVFILE_PATH") or config.path)


def _render(env: EnvFile, output_format: str) -> str:
    if output_format == "yaml":
        return yaml.safe_dump(dict(env.items()), default_flow_style=False, allow_unicode=True).rstrip("\n")
    if output_format == "json":
        return json.dumps(dict(env.items()), indent=2, ensure_ascii=False)
    return "\n".join(f"{key}: {value}" for key, value in env.items())


def _save(env: EnvFile, dry_run: bool) -> None:
    if dry_run:
        sys.stdout.write(env.to_bytes().decode("utf-8"))
    else:
        env.write()


def _run(args: argparse.Namespace) -> int:
    config = load_config(args.config) if args.config else CliConfig()
    path = _resolve_path(args, config)
    env = EnvFile(path)
    if args.verbose:
        print(f"{path}: {len(env)} entries", file=sys.stderr)

    if args.command == "show":
        rendered = _render(env, args.format or config.format)
        if rendered:
            print(rendered)
        return 0

    if args.command == "get":
        value = env.get(args.key)
        if value is None:
            print(f"{args.key} is not set in {path}", file=sys.stderr)
            return 1
        print(value)
        return 0

    if args.command == "set":
        env.update(args.key, args.value)
        _save(env, args.dry_run)
        return 0

    if args.command == "unset":
        if env.remove(args.key) is None:
            print(f"{args.key} is not set in {path}", file=sys.stderr)
            return 1
        _save(env, args.dry_run)
        return 0

    if args.check:
        if path.read_bytes() != env.to_bytes():
            print(f"{path} is not in canonical form", file=sys.stderr)
            return 1
        return 0
    env.write()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    try:
        return _run(args)
    except (OSError, ConfigError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
