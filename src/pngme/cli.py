"""Command line interface for hiding messages in PNG chunks."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .chunk import Chunk
from .chunk_type import ChunkType
from .errors import ChunkNotFound, FormatError, InvalidUtf8
from .storage import load_png, save_png

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def encode(args: argparse.Namespace) -> None:
    png = load_png(args.path)
    try:
        message = args.message.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidUtf8(f"Message cannot be encoded as UTF-8: {exc}") from exc
    chunk = Chunk(ChunkType.from_str(args.chunk_type), message)
    png.append_chunk(chunk)
    output = args.output or args.path
    save_png(png, output)
    logger.info("wrote %s chunk to %s", chunk.chunk_type, output)


def decode(args: argparse.Namespace) -> None:
    png = load_png(args.path)
    chunk = png.chunk_by_type(args.chunk_type)
    if chunk is None:
        raise ChunkNotFound(f"No {args.chunk_type!r} chunk in {args.path}")
    print(chunk.data_as_string())


def remove(args: argparse.Namespace) -> None:
    png = load_png(args.path)
    chunk = png.remove_first_chunk(args.chunk_type)
    save_png(png, args.path)
    print(chunk)


def print_chunks(args: argparse.Namespace) -> None:
    png = load_png(args.path)
    print(png)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pngme", description="Hide messages in PNG files")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_parser = subparsers.add_parser("encode", help="Append a message chunk to a PNG file")
    encode_parser.add_argument("path", type=Path, help="PNG file to modify")
    encode_parser.add_argument("chunk_type", help="Four-letter chunk type, e.g. ruSt")
    encode_parser.add_argument("message", help="Text to store in the chunk")
    encode_parser.add_argument("output", type=Path, nargs="?", help="Write here instead of PATH")
    encode_parser.set_defaults(handler=encode)

    decode_parser = subparsers.add_parser("decode", help="Print the message stored in a chunk")
    decode_parser.add_argument("path", type=Path, help="PNG file to read")
    decode_parser.add_argument("chunk_type", help="Four-letter chunk type to look up")
    decode_parser.set_defaults(handler=decode)

    remove_parser = subparsers.add_parser("remove", help="Remove the first chunk of a type")
    remove_parser.add_argument("path", type=Path, help="PNG file to modify")
    remove_parser.add_argument("chunk_type", help="Four-letter chunk type to remove")
    remove_parser.set_defaults(handler=remove)

    print_parser = subparsers.add_parser("print", help="List every chunk in a PNG file")
    print_parser.add_argument("path", type=Path, help="PNG file to read")
    print_parser.set_defaults(handler=print_chunks)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger("pngme").setLevel(logging.DEBUG if args.verbose else logging.WARNING)
    try:
        args.handler(args)
    except (FormatError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
