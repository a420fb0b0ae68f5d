"""CLI interface for env-masker — preview what the editor overlay would hide.

Usage:
    # List value candidates (stdout: JSON array)
    env-masker scan .env

    # Print the file with masked values starred out
    env-masker mask .env

    # Same, after clicking line 2, column 10 (both 0-based)
    env-masker mask --reveal 2:10 .env

    # Force a grammar and read settings from YAML
    env-masker --config masker.yaml mask --kind json settings.local
"""

from __future__ import annotations
import argparse
import json
import logging
import sys

from .config import ConfigError, MaskingConfig, load_from_yaml
from .document import Editor, TextDocument
from .engine import MaskingEngine
from .events import Activated, SelectionChanged
from .host import MaskerHost, RecordingSink
from .types import FileKind, SelectionChangeKind, Span

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

MASK_CHAR = "*"


def setup_logging(verbose: bool) -> None:
    """Log to stderr unless the root logger is already configured."""
    logging.basicConfig(
        format=LOG_FORMAT,
        level=logging.DEBUG if verbose else logging.WARNING,
    )


def _parse_position(raw: str) -> tuple[int, int]:
    line, sep, column = raw.partition(":")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected LINE:COL, got {raw!r}")
    try:
        return int(line), int(column)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected LINE:COL, got {raw!r}") from None


def _build_engine(args: argparse.Namespace) -> MaskingEngine:
    config = load_from_yaml(args.config) if args.config else MaskingConfig()
    kind = FileKind(args.kind) if args.kind else None
    return MaskingEngine(config, kind=kind)


def apply_mask(text: str, spans: tuple[Span, ...]) -> str:
    """Star out every masked character, leaving line breaks alone."""
    chars = list(text)
    for span in spans:
        for i in range(span.start, span.end):
            if chars[i] not in "\r\n":
                chars[i] = MASK_CHAR
    return "".join(chars)


def cmd_scan(args: argparse.Namespace) -> None:
    """Dump candidates and their identities as JSON."""
    engine = _build_engine(args)
    document = TextDocument.open(args.file)

    output = []
    for candidate, identity in engine.scan(document):
        start = document.offset_to_position(candidate.span.start)
        end = document.offset_to_position(candidate.span.end)
        output.append({
            "value": candidate.value,
            "kind": candidate.kind.value,
            "start": candidate.span.start,
            "end": candidate.span.end,
            "line": start.line,
            "start_col": start.column,
            "end_col": end.column,
            "identity": identity,
        })
    json.dump(output, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")


def cmd_mask(args: argparse.Namespace) -> None:
    """Render the file the way the overlay would show it."""
    sink = RecordingSink()
    host = MaskerHost(engine=_build_engine(args), sink=sink)
    document = TextDocument.open(args.file)
    editor = Editor(document)

    host.dispatch(Activated(editor))
    for line, column in args.reveal:
        editor.click(line, column)
        host.dispatch(SelectionChanged(editor, SelectionChangeKind.MOUSE))

    sys.stdout.write(apply_mask(document.get_text(), sink.current_mask()))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="env-masker",
        description="Mask secret values in .env and JSON files",
    )
    parser.add_argument("--config", help="YAML settings file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", required=True)
    for name, help_text in (
        ("scan", "List value candidates as JSON"),
        ("mask", "Print the file with values masked"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("file", help="File to read")
        p.add_argument(
            "--kind", choices=[k.value for k in FileKind],
            help="Grammar to use (default: detect from the file name)",
        )
    sub.choices["mask"].add_argument(
        "--reveal", action="append", default=[], type=_parse_position,
        metavar="LINE:COL", help="Click this position before rendering (repeatable)",
    )

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    cmds = {
        "scan": cmd_scan,
        "mask": cmd_mask,
    }
    try:
        cmds[args.command](args)
    except ConfigError as e:
        sys.stderr.write(f"env-masker: {e}\n")
        return 2
    except (OSError, UnicodeDecodeError) as e:
        sys.stderr.write(f"env-masker: {e}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
