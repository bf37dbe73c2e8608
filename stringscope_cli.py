#!/usr/bin/env python3
"""Command-line interface for the StringScope character inspector."""

from __future__ import annotations

import argparse
import io
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from stringscope import SelectionInspector
from stringscope.render import render_listing, status_text, to_dict


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "text",
        nargs="?",
        default=None,
        help="Text to inspect. Read from --file or stdin when omitted.",
    )
    parser.add_argument(
        "--file",
        type=Path,
        default=None,
        help="Read the text to inspect from this file",
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Analyse the text as-is without stripping enclosing quotes",
    )
    parser.add_argument(
        "--keep-newline",
        action="store_true",
        help="Keep the trailing newline of file or stdin input",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the analysis as JSON instead of a listing",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log detection and analysis details to stderr",
    )
    return parser.parse_args(argv)


def configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    root = logging.getLogger("stringscope")
    root.setLevel(logging.DEBUG)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        root.addHandler(handler)


def read_input(args: argparse.Namespace) -> str:
    if args.text is not None:
        return args.text
    if args.file is not None:
        if not args.file.exists():
            raise SystemExit(f"missing input file: {args.file}")
        try:
            text = args.file.read_text("utf-8")
        except UnicodeDecodeError:
            raise SystemExit(f"input is not valid UTF-8: {args.file}") from None
    else:
        try:
            text = sys.stdin.read()
        except UnicodeDecodeError:
            raise SystemExit("input is not valid UTF-8: <stdin>") from None
    if not args.keep_newline and text.endswith("\n"):
        text = text[:-1]
        if text.endswith("\r"):
            text = text[:-1]
    return text


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    configure_logging(args.verbose)
    text = read_input(args)

    selection = SelectionInspector(detect_literals=not args.raw, icon=None).inspect(text)
    # Surrogate halves cannot be encoded on their own.
    if isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(errors="backslashreplace")

    if args.json:
        payload = dict(to_dict(selection.result))
        payload["literal"] = selection.is_literal
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    print(status_text(selection.result))
    if selection.is_literal:
        print("string literal detected; analysing quoted content")
    print(render_listing(selection.result, selection.analysed_text))


if __name__ == "__main__":
    main()
