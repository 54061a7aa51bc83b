"""
Command Line Interface for Comment Extractor
"""

import argparse
import csv
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .core.config import ExtractorConfig
from .core.extractor import CommentExtractor
from .core.html_fetcher import HTMLFetcher
from .core.models import CommentRecord

FIELDNAMES = ['id', 'author', 'content', 'timestamp', 'avatar_url']


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Comment Extractor - pull community comments out of any page'
    )

    # Input
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        '--url',
        type=str,
        help='Page URL to fetch'
    )
    source.add_argument(
        '--file',
        type=str,
        help='Local HTML file to read'
    )
    parser.add_argument(
        '--unit-id',
        type=str,
        required=True,
        help='Identifier of the content unit (seeds fallback comment ids)'
    )

    # Fetching
    parser.add_argument(
        '--timeout',
        type=int,
        default=30,
        help='Request timeout in seconds (default: 30)'
    )

    # Output
    parser.add_argument(
        '--output',
        type=str,
        help='Output file path'
    )
    parser.add_argument(
        '--format',
        type=str,
        choices=['json', 'csv'],
        default='json',
        help='Output format (default: json)'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )

    config = ExtractorConfig.from_env()

    if args.file:
        try:
            html = Path(args.file).read_text(encoding='utf-8', errors='replace')
        except OSError as e:
            print(f"❌ Cannot read {args.file}: {e}", file=sys.stderr)
            return 1
        records = CommentExtractor(config).extract(html, args.unit_id)
    else:
        with HTMLFetcher(timeout=args.timeout) as fetcher:
            extractor = CommentExtractor(config, fetcher=fetcher)
            records = extractor.fetch_comments(args.url, args.unit_id)

    if args.output:
        save_results(records, args.output, args.format)
    else:
        print(json.dumps([r.to_dict() for r in records], indent=2, ensure_ascii=False))

    print(f"✅ Extracted {len(records)} comments", file=sys.stderr)
    return 0


def save_results(records: List[CommentRecord], output_path: str, format: str) -> None:
    """Save records as JSON or CSV"""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    rows = [r.to_dict() for r in records]

    if format == 'json':
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(rows, f, indent=2, ensure_ascii=False)
    else:
        with open(output_path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=FIELDNAMES)
            writer.writeheader()
            writer.writerows(rows)

    print(f"💾 Saved to {output_path} ({format.upper()})", file=sys.stderr)


if __name__ == '__main__':
    sys.exit(main())
