"""
AnalogSight CLI — evaluate an analog literal from a file or stdin.

Usage:
  python -m analogsight box.txt            # prints {"kind": ..., "value": {...}}
  cat box.txt | python -m analogsight -    # reads stdin
  python -m analogsight box.txt -v         # with pipeline logging

A malformed literal prints a diagnostic to stderr and exits with status 1.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from analogsight.diagnostics.reporter import render, report
from analogsight.engine.evaluate import evaluate


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="AnalogSight — evaluate ASCII-art analog literals")
    parser.add_argument("input", help="File holding the literal body, or - for stdin")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log pipeline stages")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s %(levelname)s %(message)s",
    )

    if args.input == "-":
        text = sys.stdin.read()
        source_name = "<stdin>"
    else:
        try:
            with open(args.input, encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            print(f"Error: cannot read {args.input}: {e}", file=sys.stderr)
            return 2
        source_name = args.input

    result = evaluate(text)
    if result.error is not None:
        print(render(report(result.error, result.grid), source_name), file=sys.stderr)
        return 1

    print(json.dumps({"kind": result.kind.value, "value": result.value.model_dump()}))
    return 0


if __name__ == "__main__":
    sys.exit(main())
