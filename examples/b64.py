#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from b64codec import (
    B64CodecError,
    get_decoder,
    get_encoder,
    get_mime_decoder,
    get_mime_encoder,
    get_url_decoder,
    get_url_encoder,
)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="base64 encode or decode a file (or stdin)")
    p.add_argument("path", nargs="?", help="input file, stdin when omitted")
    p.add_argument("-d", "--decode", action="store_true", help="decode instead of encode")
    group = p.add_mutually_exclusive_group()
    group.add_argument("--url", action="store_true", help="URL and filename safe alphabet")
    group.add_argument("--mime", action="store_true", help="RFC 2045 MIME profile")
    p.add_argument(
        "--line-length",
        type=int,
        default=None,
        help="MIME line length (rounded down to a multiple of 4), implies --mime",
    )
    p.add_argument("--no-padding", action="store_true", help="omit trailing '=' padding")
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.url and args.line_length is not None:
        parser.error("argument --line-length: not allowed with argument --url")
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    data = Path(args.path).read_bytes() if args.path else sys.stdin.buffer.read()
    mime = args.mime or args.line_length is not None

    try:
        if args.decode:
            if args.url:
                decoder = get_url_decoder()
            elif mime:
                decoder = get_mime_decoder()
            else:
                decoder = get_decoder()
            if not decoder.mime:
                # Strict decoders reject the newline most tools append.
                data = data.strip()
            sys.stdout.buffer.write(decoder.decode(data))
            return 0

        if args.url:
            encoder = get_url_encoder()
        elif args.line_length is not None:
            encoder = get_mime_encoder(args.line_length, b"\r\n")
        elif mime:
            encoder = get_mime_encoder()
        else:
            encoder = get_encoder()
        if args.no_padding:
            encoder = encoder.without_padding()
        sys.stdout.buffer.write(encoder.encode(data) + b"\n")
    except B64CodecError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
