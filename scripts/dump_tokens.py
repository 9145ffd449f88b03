#!/usr/bin/env python3
"""Print the token stream of a Clausewitz script."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from shroudingers.lexer import dump_tokens, tokenize, tokenize_without_comments


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump tokens of a Clausewitz script file")
    parser.add_argument("path", type=Path, help="Script file to tokenize")
    parser.add_argument(
        "--no-comments",
        action="store_true",
        help="Drop COMMENT tokens, as the parser does",
    )
    parser.add_argument("--output", type=Path, default=None, help="Write the dump to a file instead of stdout")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    path: Path = args.path
    if not path.is_file():
        raise SystemExit(f"Not a file: {path}")

    text = path.read_text(encoding="utf-8-sig")
    result = tokenize_without_comments(text) if args.no_comments else tokenize(text)

    if args.output is None:
        dump_tokens(result.tokens, result.diagnostic)
    else:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        with args.output.open("w", encoding="utf-8") as f:
            for idx, tok in enumerate(result.tokens):
                f.write(f"{idx:03d} {tok.kind.name:<22} pos=({tok.line},{tok.column}) text={tok.text!r}\n")
        print(f"Wrote {len(result.tokens)} tokens to {args.output}")

    if not result.success:
        print(f"error: {result.error}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
