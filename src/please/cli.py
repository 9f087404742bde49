"""please CLI - review generated scripts before running them.

Usage:
    please check script.sh          # Show warnings and the risk verdict
    please check - < script.ps1     # Read the script from stdin
    please check x.sh --confirm     # Ask for the confirmation the verdict needs
    please check x.sh --json        # Machine-readable output
    please kinds                    # List accepted --kind names

Exit codes:
    0  green (or confirmed with --confirm)
    1  yellow
    2  red
    3  cancelled at the confirmation prompt
    4  script could not be read
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from .classifier import ScriptWarning, classify
from .config import Settings
from .logs import setup_logging
from .patterns import Tier
from .risk import DEFAULT_CONFIRM_PHRASE, RiskLevel, aggregate, confirmation_for
from .script import KIND_NAMES, ScriptDocument, ScriptKind

console = Console()
logger = logging.getLogger(__name__)

EXIT_GREEN = 0
EXIT_YELLOW = 1
EXIT_RED = 2
EXIT_CANCELLED = 3
EXIT_UNREADABLE = 4

_LEVEL_EXIT = {
    RiskLevel.GREEN: EXIT_GREEN,
    RiskLevel.YELLOW: EXIT_YELLOW,
    RiskLevel.RED: EXIT_RED,
}

_TIER_STYLE = {
    Tier.CRITICAL: "bold red",
    Tier.HIGH: "red",
    Tier.MEDIUM: "yellow",
    Tier.INFO: "dim",
}

_LEVEL_STYLE = {
    RiskLevel.GREEN: "green",
    RiskLevel.YELLOW: "yellow",
    RiskLevel.RED: "red",
}


def _read_script(path: Optional[str]) -> str:
    if not path or path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def resolve_kind(requested: Optional[str], text: str, path: Optional[str]) -> ScriptKind:
    name = (requested or "auto").strip().lower()
    if name == "auto":
        filename = path if path and path != "-" else None
        return ScriptKind.detect(text, filename)
    return ScriptKind.parse(name)


def _print_warnings(warnings: List[ScriptWarning]) -> None:
    if not warnings:
        console.print("[green]No warnings.[/green]")
        return
    for w in warnings:
        console.print(f"  {escape(w.text)}", style=_TIER_STYLE[w.tier])


def _print_verdict(level: RiskLevel, kind: ScriptKind) -> None:
    style = _LEVEL_STYLE[level]
    console.print(
        Panel.fit(
            f"Risk: [bold {style}]{level.value.upper()}[/bold {style}]  |  Kind: {kind.value}",
            title="please",
            border_style=style,
        )
    )


def _confirm(level: RiskLevel, phrase: str) -> bool:
    confirmation = confirmation_for(level, phrase=phrase)
    if not confirmation.required:
        console.print(f"[green]{escape(confirmation.prompt)}[/green]")
        return True

    if level == RiskLevel.RED:
        console.print("[bold red]SAFETY WARNING: This script contains potentially dangerous operations![/bold red]")
    try:
        answer = console.input(f"{escape(confirmation.prompt)} ")
    except (EOFError, KeyboardInterrupt):
        console.print()
        return False
    return confirmation.accepts(answer)


def run_check(
    path: Optional[str],
    kind: Optional[str],
    *,
    as_json: bool = False,
    confirm: bool = False,
    include_heuristics: bool = True,
    confirm_phrase: str = DEFAULT_CONFIRM_PHRASE,
) -> int:
    try:
        text = _read_script(path)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Cannot read script:[/red] {escape(str(e))}")
        return EXIT_UNREADABLE

    document = ScriptDocument(text=text, kind=resolve_kind(kind, text, path))
    warnings = classify(document, include_heuristics=include_heuristics)
    level = aggregate(warnings)
    logger.info("%s: %s (%d warnings)", path or "<stdin>", level.value, len(warnings))

    if as_json:
        payload = {
            "kind": document.kind.value,
            "risk": level.value,
            "warnings": [w.to_dict() for w in warnings],
        }
        console.print(json.dumps(payload, ensure_ascii=False), markup=False, highlight=False, emoji=False, soft_wrap=True)
    else:
        _print_warnings(warnings)
        _print_verdict(level, document.kind)

    if confirm:
        if not _confirm(level, confirm_phrase):
            console.print("[cyan]Cancelled.[/cyan]")
            return EXIT_CANCELLED
        return EXIT_GREEN

    return _LEVEL_EXIT[level]


def run_kinds() -> int:
    for name in KIND_NAMES:
        console.print(f"  {name:12} -> {ScriptKind.parse(name).value}")
    console.print("  auto         -> detect from file suffix or shebang")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="please",
        description="please: review AI-generated shell scripts before running them",
    )
    parser.add_argument("--log-level", help="debug, info, warning or error")

    sub = parser.add_subparsers(dest="subcmd")

    p_check = sub.add_parser("check", help="Classify a script and print its risk verdict")
    p_check.add_argument("path", nargs="?", default="-", help="Script file ('-' for stdin)")
    p_check.add_argument(
        "--kind",
        choices=["auto", *KIND_NAMES],
        help="Script kind, any name from 'please kinds' (default: from config, else auto)",
    )
    p_check.add_argument("--json", action="store_true", help="Print JSON instead of a report")
    p_check.add_argument("--confirm", action="store_true", help="Ask for the confirmation the verdict requires")
    p_check.add_argument(
        "--no-heuristics",
        action="store_true",
        help="Only report pattern matches (skip shebang/length/error-handling hints)",
    )

    sub.add_parser("kinds", help="List accepted script kind names")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = Settings.load()
    setup_logging(args.log_level or settings.log_level)

    if args.subcmd == "check":
        raise SystemExit(
            run_check(
                args.path,
                args.kind or settings.script_kind,
                as_json=args.json,
                confirm=args.confirm,
                include_heuristics=settings.heuristics and not args.no_heuristics,
                confirm_phrase=settings.confirm_phrase,
            )
        )

    if args.subcmd == "kinds":
        raise SystemExit(run_kinds())

    parser.print_help()
    raise SystemExit(2)


if __name__ == "__main__":
    main()
