"""
Command line entry point for the extended ASCII report.

With no arguments, prints the 128 table lines and nothing else.
"""
import argparse
import sys
from typing import List, Optional

from extascii.reporter import DEFAULT_ENCODING, DEFAULT_TITLE, ReporterError, run_report
from extascii.serialization import state_to_json, state_to_yaml


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="extascii",
        description="Print extended ASCII codes 128-255 with their glyphs",
    )
    parser.add_argument(
        "--encoding",
        default=DEFAULT_ENCODING,
        help=f"Code page used to render glyphs (default: {DEFAULT_ENCODING})",
    )
    parser.add_argument(
        "--separator",
        default="",
        help="Text placed between the code and glyph columns (default: none)",
    )
    parser.add_argument(
        "--title",
        action="store_true",
        help=f"Print the heading '{DEFAULT_TITLE}' before the table",
    )
    parser.add_argument(
        "--summary",
        choices=["json", "yaml"],
        help="Print the computed values after the table",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Glyphs the terminal cannot encode print as "?"
    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="replace")

    try:
        state = run_report(
            sys.stdout,
            encoding=args.encoding,
            separator=args.separator,
            title=DEFAULT_TITLE if args.title else None,
        )
    except ReporterError as e:
        parser.error(str(e))

    if args.summary == "json":
        print(state_to_json(state))
    elif args.summary == "yaml":
        print(state_to_yaml(state), end="")

    return 0


if __name__ == "__main__":
    sys.exit(main())
