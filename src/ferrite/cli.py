from __future__ import annotations

import argparse
import json
import logging
import sys

from .api import validate_file
from .errors import JsonError
from .render import render_diagnostic


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="ferrite",
        description="JSON validator that tells you how to fix your mistakes",
    )
    ap.add_argument("file", metavar="FILE", help="JSON document to validate")
    ap.add_argument(
        "-c",
        "--context",
        type=int,
        default=2,
        help="Source lines shown around the error (default: 2)",
    )
    ap.add_argument("--json", action="store_true", help="Print the diagnostic as JSON")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        validate_file(args.file)
    except OSError as e:
        print(f"ferrite: failed to read file '{args.file}': {e}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(f"ferrite: '{args.file}' is not UTF-8 text: {e}", file=sys.stderr)
        return 1
    except JsonError as e:
        if args.json:
            print(json.dumps(e.to_dict(), indent=2, sort_keys=True))
        else:
            print(render_diagnostic(e, context_lines=max(args.context, 0)), file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps({"file": args.file, "valid": True}, indent=2, sort_keys=True))
    else:
        print(f"{args.file} is valid!")
    return 0
