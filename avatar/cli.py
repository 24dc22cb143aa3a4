#!/usr/bin/env python3
"""Render an avatar to a PNG file from the command line."""

import argparse
import sys

from .core import SUPPORTED_SIZES, configure_logging, load_config
from .encode import save_png
from .errors import EncodingError, InvalidInputError, InvalidTimestampError, UnsupportedSizeError
from .render import render
from .seed import resolve_time_key


def build_parser(default_size: int) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="avatar-render",
        description="Render the daily pixel avatar for an input string",
    )
    parser.add_argument("input", help="string to derive the avatar from (e.g. an email)")
    parser.add_argument(
        "--size",
        type=int,
        choices=SUPPORTED_SIZES,
        default=default_size,
        help=f"canvas size in pixels (default: {default_size})",
    )
    parser.add_argument(
        "--timestamp",
        default="",
        help="Unix seconds selecting the UTC day (default: today)",
    )
    parser.add_argument("--out", help="output PNG path (default: avatar-<hash>.png)")
    parser.add_argument("--config", help="path to an avatar YAML config")
    return parser


def main(argv=None) -> int:
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--config")
    known, _ = pre.parse_known_args(argv)
    cfg = load_config(known.config)
    log = configure_logging(cfg, "avatar_cli")

    parser = build_parser(cfg.render.default_size)
    args = parser.parse_args(argv)

    try:
        time_key = resolve_time_key(args.timestamp)
        result = render(args.input, time_key, args.size)
    except (InvalidInputError, InvalidTimestampError, UnsupportedSizeError) as e:
        parser.error(str(e))

    out = args.out or f"avatar-{result.hex_digest[:12]}.png"
    try:
        save_png(result.canvas, out)
    except EncodingError as e:
        log.error(f"Failed to write {out}: {e}")
        return 1

    print(f"hash={result.hex_digest}")
    print(f"time_key={result.time_key}")
    print(f"file={out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
