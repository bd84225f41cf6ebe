"""Command line inspection of test groups and their resolved variants."""
from __future__ import annotations

import argparse
import dataclasses
import enum
import json
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from common.config import load_settings
from common.logging import configure_logging, get_logger
from variants.bootstrap import build_registry, build_source
from variants.color import Color
from variants.errors import UnknownTestGroupError, VariantSourceError
from variants.sources import InMemoryVariantSource, LayeredVariantSource

LOGGER = get_logger(__name__)


def _parse_assignment(text: str) -> tuple[str, str]:
    key, sep, raw = text.partition("=")
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError(f"Expected key=value, got {text!r}")
    return key.strip(), raw


def _jsonable(value: Any) -> Any:
    if isinstance(value, Color):
        return value.hex
    if isinstance(value, enum.Enum):
        return value.value
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {item.name: _jsonable(getattr(value, item.name)) for item in dataclasses.fields(value)}
    if isinstance(value, dict):
        return {str(key): _jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    return value


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="variants", description="Inspect A/B test variants")
    parser.add_argument("--log-level", default=None, help="Log level name, e.g. DEBUG")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("groups", help="List registered test groups")

    show = subparsers.add_parser("show", help="Print the resolved variants of a group")
    show.add_argument("group", help="Test group id, e.g. home")
    show.add_argument("--file", type=Path, default=None, help="YAML assignments file")
    show.add_argument(
        "--set",
        dest="assignments",
        action="append",
        type=_parse_assignment,
        default=[],
        metavar="KEY=VALUE",
        help="Override one assignment (repeatable)",
    )
    show.add_argument("--json", action="store_true", help="Emit JSON instead of text")
    return parser.parse_args(argv)


def _show(args: argparse.Namespace) -> int:
    settings = load_settings()
    if args.file is not None:
        settings = replace(settings, variants_file=args.file)
    overrides: Dict[str, Any] = dict(args.assignments)
    try:
        source = LayeredVariantSource(InMemoryVariantSource(overrides), build_source(settings))
    except VariantSourceError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    registry = build_registry(settings, source=source)
    try:
        group = registry.get(args.group)
    except UnknownTestGroupError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    resolved = {key: _jsonable(value) for key, value in group.resolve_all().items()}
    LOGGER.debug("Resolved %d variants for %s", len(resolved), group.group_id)
    if args.json:
        print(json.dumps({"group": group.group_id, "variants": resolved}, indent=2, ensure_ascii=False))
        return 0
    lines: List[str] = [f"[{group.group_id}]"]
    for definition in group.definitions():
        lines.append(f"{definition.key} = {resolved[definition.key]}")
    print("\n".join(lines))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)
    if args.command == "groups":
        registry = build_registry(source=InMemoryVariantSource())
        print("\n".join(registry.registered()))
        return 0
    return _show(args)


if __name__ == "__main__":
    raise SystemExit(main())
