"""Command-line text extraction for Word 97-2003 documents.

Usage:
    worddoc report.doc                       # Print the body text
    worddoc report.doc --section footnotes   # Print one section
    worddoc report.doc --section all --raw   # Print every section, unfiltered
    worddoc report.doc --bookmarks           # List bookmarks with their ranges
    worddoc report.doc --json                # Dump the decoded document as JSON
"""

import argparse
import asyncio
import json
import logging
import sys

from worddoc.config import settings
from worddoc.enums import DocumentSection
from worddoc.exceptions import WordExtractionError
from worddoc.services.extraction import Document, WordExtractor
from worddoc.services.extraction.text import join_surrogates


def print_sections(document: Document, section: str, filter_text: bool) -> None:
    """Print one section, or every non-empty section with a heading."""
    if section != "all":
        print(join_surrogates(document.get_section(DocumentSection(section), filter_text)))
        return

    for name in DocumentSection:
        text = join_surrogates(document.get_section(name, filter_text))
        if not text:
            continue
        print(f"--- {name.value} ---")
        print(text)


def print_bookmarks(document: Document) -> None:
    """List bookmarks with their character ranges and covered text."""
    if not document.bookmarks:
        print("No bookmarks found")
        return

    print(f"\n{'Name':<30} {'Start':>8} {'End':>8}  Text")
    print("-" * 80)
    for name, rng in document.bookmarks.items():
        text = join_surrogates(document.get_bookmark_text(name)).replace("\r", " ")
        text = (text[:27] + "...") if len(text) > 30 else text
        print(f"{name:<30} {rng.start:>8} {rng.end:>8}  {text}")
    print(f"\nTotal: {len(document.bookmarks)} bookmark(s)")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Extract text from Word 97-2003 documents")
    parser.add_argument("path", help="Path to the .doc file")
    parser.add_argument(
        "--section",
        choices=[s.value for s in DocumentSection] + ["all"],
        default=DocumentSection.BODY.value,
        help="Section to print (default: body)",
    )
    parser.add_argument("--raw", action="store_true", help="Keep Word control characters")
    parser.add_argument("--bookmarks", action="store_true", help="List bookmarks")
    parser.add_argument("--json", action="store_true", help="Print the document as JSON")

    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level, format=settings.log_format)

    try:
        document = asyncio.run(WordExtractor().extract(args.path))
    except WordExtractionError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(document.to_dict(), ensure_ascii=False, indent=2))
    elif args.bookmarks:
        print_bookmarks(document)
    else:
        print_sections(document, args.section, filter_text=not args.raw and settings.filter_text)

    return 0


if __name__ == "__main__":
    sys.exit(main())
