# cli.py
# Console front end for the Huffman codec

"""
Reads text, Huffman-encodes it and prints the encoded bits, the decoded text,
the conversion table and the tree.

How to run:
  huffman-codec --lines 2 < input.txt
  huffman-codec --text "aaab"
  echo "hello world" | huffman-codec --no-tree
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

import huffman as huff

logger = logging.getLogger(__name__)

SEPARATOR = "----------"


def read_lines(stream: TextIO, count: int) -> str:
    # each line keeps a trailing newline, including the last one
    lines = []
    for _ in range(count):
        line = stream.readline()
        if not line:
            break
        lines.append(line.rstrip("\r\n") + "\n")
    if len(lines) < count:
        logger.warning("expected %d line(s), got %d", count, len(lines))
    return "".join(lines)


def read_text(args: argparse.Namespace, stream: TextIO) -> str:
    if args.text is not None:
        return args.text
    if args.lines is not None:
        return read_lines(stream, args.lines)
    return stream.read()


def report(text: str, show_table: bool = True, show_tree: bool = True) -> List[str]:
    result = huff.compress(text)
    decoded = huff.decompress(result)
    logger.debug("encoded %d symbol(s) into %d bit(s)", len(text), len(result.bits))

    out = [
        SEPARATOR,
        f"Encoded String: {result.bits}",
        "Decoded String:",
        decoded,
    ]
    if show_table:
        out.append(f"{SEPARATOR}\nConversion Table")
        out.extend(huff.format_code_table(huff.build_code_table(result.tree)))
    if show_tree:
        out.append(f"{SEPARATOR}\nHuffman Tree")
        out.append(huff.render_tree(result.tree))
    return out


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="huffman-codec", description="Huffman-encode text and show the code")
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--text", type=str, default=None, help="Text to encode instead of reading stdin")
    src.add_argument("--lines", type=int, default=None, help="Number of lines to read from stdin")
    ap.add_argument("--no-table", action="store_true", help="Do not print the conversion table")
    ap.add_argument("--no-tree", action="store_true", help="Do not print the Huffman tree")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    return ap


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.lines is not None and args.lines < 0:
        print("error: --lines must not be negative", file=sys.stderr)
        return 2

    text = read_text(args, stdin if stdin is not None else sys.stdin)
    try:
        out = report(text, show_table=not args.no_table, show_tree=not args.no_tree)
    except huff.HuffmanError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    for line in out:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
