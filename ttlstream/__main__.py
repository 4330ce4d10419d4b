"""Parse a Turtle file and report what was assembled.

Usage:
  python -m ttlstream ontology.ttl
  python -m ttlstream ontology.ttl.gz --strict --json document.json -v
"""

import argparse
import logging
import sys
from pathlib import Path

from ttlstream.config import load_parser_config
from ttlstream.errors import NotATurtleError, TruncatedInputError
from ttlstream.loader import load_turtle_document
from ttlstream.logging import setup_logging
from ttlstream.vocab import undeclared_namespaces


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ttlstream",
        description="Classify the lines of a Turtle file and assemble its headers and statements.",
    )
    parser.add_argument("file", type=Path, help="Turtle file (.ttl, or .ttl.gz)")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to ttlstream.toml (default: $TTLSTREAM_CONFIG, then ./ttlstream.toml)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when the input ends inside a statement",
    )
    parser.add_argument("--json", type=Path, default=None, metavar="OUT", help="Write the document as JSON to OUT")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log diagnostics at debug level")
    args = parser.parse_args(argv)

    log = setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if not args.file.is_file():
        print(f"Error: file not found: {args.file}", file=sys.stderr)
        return 1

    try:
        config = load_parser_config(args.config)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    try:
        result = load_turtle_document(args.file, config=config)
        if args.strict and result.truncated:
            raise TruncatedInputError(result.diagnostics.truncated_count)
    except (NotATurtleError, TruncatedInputError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(f"Error: {args.file} is not valid {config.encoding} text: {e}", file=sys.stderr)
        return 1

    document = result.document
    if args.verbose:
        log.debug(result.diagnostics)

    print(f"{args.file}: {len(document.headers)} headers, {len(document.body)} statements")
    if document.base_iri is not None:
        print(f"  base: {document.base_iri}")
    for kind, count in sorted(result.diagnostics.summary().items()):
        print(f"  {kind}: {count}")
    missing = undeclared_namespaces(document)
    if missing:
        print(f"  undeclared prefixes: {', '.join(sorted(missing))}")

    if args.json is not None:
        args.json.write_text(document.model_dump_json(indent=2), encoding="utf-8")
        print(f"  wrote {args.json}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
