"""
Module: cli

Purpose:
    Command-line front end: validate and parse one document, printing
    either a short report or the JSON payload an upload handler returns.

Usage:
    quiz-import worksheet.pdf
    quiz-import worksheet.docx --json
    quiz-import notes.rtf --validate-only

Exit codes:
    0  parsed (or validated) successfully
    1  invalid file or failed parse
    2  usage error
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from quiz_toolkit import __version__
from quiz_toolkit.core.models.results import ParseResult
from quiz_toolkit.core.utils.serialization import result_to_json
from quiz_toolkit.importer.config import ImportConfig
from quiz_toolkit.importer.pipeline import parse_document, validate_file

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quiz-import",
        description="Parse a worksheet (PDF, DOCX or TXT) into quiz questions",
    )
    parser.add_argument("file", type=Path, help="Document to import")
    parser.add_argument("--json", action="store_true",
                        help="Print the full result as JSON")
    parser.add_argument("--validate-only", action="store_true",
                        help="Only check file type and size")
    parser.add_argument("--max-size-mb", type=int, default=ImportConfig.max_size_mb,
                        help="Upload size limit in megabytes (default: %(default)s)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _print_report(result: ParseResult) -> None:
    if not result.success:
        print(f"Error: {result.error}")
        return

    print(f"Questions:  {len(result.questions)}")
    print(f"Confidence: {result.confidence} ({result.confidence_level})")
    if result.transcript:
        print("Transcript: found")
    if result.vocabulary:
        print("Vocabulary: found")

    for question in result.questions:
        answer = question.correct_answer or "?"
        print(f"\n[{question.id}] {question.question_text}  (answer: {answer})")
        for letter, option in zip("ABCD", question.options):
            print(f"    {letter}) {option}")

    if result.warnings:
        print("\nWarnings:")
        for warning in result.warnings:
            print(f"  - {warning}")


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return the process exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.max_size_mb <= 0:
        parser.error("--max-size-mb must be positive")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    path: Path = args.file
    if not path.is_file():
        print(f"Error: File not found: {path}", file=sys.stderr)
        return 1

    validation = validate_file(path.name, path.stat().st_size, args.max_size_mb)
    if args.validate_only:
        if args.json:
            print(json.dumps(validation.to_dict(), indent=2))
        elif validation.valid:
            print(f"OK: {path.name}")
        else:
            print(f"Invalid: {validation.error}")
        return 0 if validation.valid else 1

    if not validation.valid:
        print(f"Error: {validation.error}", file=sys.stderr)
        return 1

    config = ImportConfig(max_size_mb=args.max_size_mb)
    logger.debug(f"Importing {path} (limit {config.max_size_mb}MB)")
    result = parse_document(path.read_bytes(), path.name, config=config)

    if args.json:
        print(result_to_json(result))
    else:
        _print_report(result)

    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
