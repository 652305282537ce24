# md2pptx/cli.py
from __future__ import annotations

import argparse
import logging
import pathlib
import sys
from typing import Optional

from .config import LOG_LEVEL
from .convert import markdown_to_pptx


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="md2pptx",
        description="Compile a markdown document into a PowerPoint deck.",
    )
    parser.add_argument("input", type=str, help="Markdown file to convert.")
    parser.add_argument(
        "output",
        type=str,
        nargs="?",
        default=None,
        help="Output .pptx path. Default: the input path with .md replaced by .pptx",
    )
    parser.add_argument(
        "--template",
        type=str,
        default=None,
        help="Optional .pptx/.potx template whose layouts and theme are reused.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log progress and diagnostics at INFO level.",
    )
    return parser.parse_args(argv)


def default_output(input_path: pathlib.Path) -> pathlib.Path:
    if input_path.suffix.lower() == ".md":
        return input_path.with_suffix(".pptx")
    return input_path.with_name(input_path.name + ".pptx")


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else LOG_LEVEL,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    in_path = pathlib.Path(args.input).expanduser()
    out_path = pathlib.Path(args.output).expanduser() if args.output else default_output(in_path)

    try:
        text = in_path.read_text(encoding="utf-8")
        template = pathlib.Path(args.template).expanduser().read_bytes() if args.template else None
        logging.getLogger(__name__).info("Converting %s", in_path)
        pptx_bytes = markdown_to_pptx(text, template_bytes=template, base_dir=in_path.parent)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_bytes(pptx_bytes)
    except (OSError, UnicodeDecodeError) as e:
        print(f"[FATAL ERROR] {e}", file=sys.stderr)
        return 1

    print(f"Written {out_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
