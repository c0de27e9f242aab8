"""entitygen command-line entry point.

Usage::

    entitygen UserEntity --json '{"uuid": "abc"}' -o lib/features/user
    entitygen Car --json-file car.json --entity-dir lib/domain/entities \\
        --model-dir lib/data/models
    python -m entitygen --dry-run
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError
from rich.prompt import Prompt

from entitygen.config import Config
from entitygen.session import CLASS_NAME, ENTITY_DIR, JSON_INPUT, MODEL_DIR, run_session
from entitygen.utils import (
    console,
    print_error,
    print_file_preview,
    print_success,
    print_summary_table,
    print_warning,
    write_file,
)


# ---------------------------------------------------------------------------
# Terminal hosts
# ---------------------------------------------------------------------------


class ConsoleHost:
    """Host backed by the terminal.

    Answers given on the command line (*presets*) are used as-is; anything
    else is prompted for with Rich unless *interactive* is off.  Directory
    questions fall back to *default_dirs* when nothing else is available.
    """

    def __init__(
        self,
        presets: Optional[dict[str, str]] = None,
        default_dirs: Optional[dict[str, Path]] = None,
        interactive: bool = True,
    ) -> None:
        self.presets = {k: v for k, v in (presets or {}).items() if v is not None}
        self.default_dirs = default_dirs or {}
        self.interactive = interactive

    def ask_string(self, key: str, prompt: str) -> Optional[str]:
        if key in self.presets:
            return self.presets[key]
        if not self.interactive:
            return None
        return Prompt.ask(prompt, console=console)

    def pick_directory(self, key: str, label: str) -> Optional[Path]:
        if key in self.presets:
            return Path(self.presets[key])
        fallback = self.default_dirs.get(key)
        if not self.interactive:
            return fallback
        answer = Prompt.ask(
            label,
            console=console,
            default=str(fallback) if fallback is not None else None,
        )
        return Path(answer) if answer else None

    async def write_file(self, path: Path, content: str) -> None:
        await asyncio.to_thread(write_file, path, content)
        console.print(f"  [green]+[/green] {path}")

    def show_info(self, message: str) -> None:
        print_success(message)

    def show_warning(self, message: str) -> None:
        print_warning(message)

    def show_error(self, message: str) -> None:
        print_error(message)


class DryRunHost(ConsoleHost):
    """Console host that prints generated files instead of writing them."""

    async def write_file(self, path: Path, content: str) -> None:
        print_file_preview(str(path), content)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="entitygen",
        description="Generate Dart entity/model classes from a sample JSON document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  entitygen UserEntity --json '{\"uuid\": \"abc\"}' -o lib/user\n"
            "  entitygen Car --json-file car.json --entity-dir lib/domain/entities "
            "--model-dir lib/data/models\n"
            "  entitygen --dry-run\n"
        ),
    )
    parser.add_argument(
        "class_name",
        nargs="?",
        default=None,
        help="Root class name, with or without the Entity suffix (prompted if omitted)",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--json", dest="json_text", default=None, help="Sample JSON document")
    source.add_argument("--json-file", default=None, help="Path to a sample JSON document")
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Directory for both entity and model files",
    )
    parser.add_argument("--entity-dir", default=None, help="Directory for entity files")
    parser.add_argument("--model-dir", default=None, help="Directory for the model file")
    parser.add_argument(
        "--config",
        default=None,
        help="JSON configuration file (defaults to ENTITYGEN_* environment variables)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print generated files instead of writing them",
    )
    parser.add_argument(
        "--no-input",
        action="store_true",
        help="Never prompt; missing values abort the run",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """CLI entry point for ``entitygen`` and ``python -m entitygen``."""
    args = build_parser().parse_args(argv)

    try:
        config = Config.load(Path(args.config)) if args.config else Config.from_env()
    except (OSError, ValidationError, ValueError) as exc:
        print_error(f"Error: could not load configuration: {exc}")
        sys.exit(1)

    json_text = args.json_text
    if args.json_file:
        try:
            json_text = Path(args.json_file).read_text(encoding="utf-8")
        except OSError as exc:
            print_error(f"Error: could not read {args.json_file}: {exc}")
            sys.exit(1)

    presets = {
        CLASS_NAME: args.class_name,
        JSON_INPUT: json_text,
        ENTITY_DIR: args.entity_dir or args.output,
        MODEL_DIR: args.model_dir or args.output,
    }
    default_dirs = {ENTITY_DIR: config.entity_path, MODEL_DIR: config.model_path}
    host_cls = DryRunHost if args.dry_run else ConsoleHost
    host = host_cls(presets, default_dirs, interactive=not args.no_input)

    result = asyncio.run(run_session(host, config))
    if result is None:
        sys.exit(1)

    print_summary_table(
        {
            "Entity": result.root_class_name,
            "Model": result.model_class_name,
            "Classes": ", ".join(result.schema_names),
            "Files": str(len(result.files)),
        },
        title="Dry run" if args.dry_run else "Generated",
    )


if __name__ == "__main__":
    main()
