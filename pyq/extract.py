"""
Extraction Module
Turns JEE exam-paper PDFs into question JSON files:
PDF -> Text -> Gemini -> <name>.json

Usage: python -m pyq.extract [--file <filename>] [--all]
"""
import sys
import argparse
from typing import List, Optional

from pyq.config import config
from pyq.pdf_parser import list_pdfs_in_folder
from pyq.pipelines.extract_pipeline import run_extraction


def select_files(pdf_files: List[str], args: argparse.Namespace) -> Optional[List[str]]:
    """
    Pick the files to process from the available PDFs.
    Returns None when a requested file is not available.
    """
    if args.all:
        return pdf_files

    if args.file is not None:
        if args.file not in pdf_files:
            return None
        return [args.file]

    # Default: first file only, as a smoke test
    return pdf_files[:1]


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line interface for extraction"""
    parser = argparse.ArgumentParser(
        description="Extract JEE questions from exam-paper PDFs into JSON files"
    )

    parser.add_argument(
        '--all',
        action='store_true',
        help='Process every PDF in the input directory (takes precedence over --file)'
    )

    parser.add_argument(
        '--file',
        type=str,
        help='Process a single PDF by filename'
    )

    parser.add_argument(
        '--input-dir',
        type=str,
        default=config.EXAM_PAPERS_DIR,
        help=f'Folder containing PDF files (default: {config.EXAM_PAPERS_DIR})'
    )

    parser.add_argument(
        '--output-dir',
        type=str,
        default=config.OUTPUT_DIR,
        help=f'Folder for JSON output (default: {config.OUTPUT_DIR})'
    )

    parser.add_argument(
        '--delay',
        type=float,
        default=config.EXTRACTION_DELAY,
        help='Seconds to wait between files (default: %(default)s)'
    )

    args = parser.parse_args(argv)

    try:
        config.validate()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        print("Please add it to your .env file", file=sys.stderr)
        return 1

    try:
        pdf_files = list_pdfs_in_folder(args.input_dir)
    except (FileNotFoundError, NotADirectoryError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not pdf_files:
        print(f"No PDF files found in {args.input_dir}", file=sys.stderr)
        return 1

    print(f"Found {len(pdf_files)} PDF files in {args.input_dir}")

    files_to_process = select_files(pdf_files, args)
    if files_to_process is None:
        print(f"File not found: {args.file}", file=sys.stderr)
        print("Available files:", file=sys.stderr)
        for name in pdf_files:
            print(f"  - {name}", file=sys.stderr)
        return 1

    if not args.all and args.file is None:
        print("\nNo arguments provided. Processing first file as a test.")
        print("Use --all to process all files or --file <filename> for a specific file.\n")

    run_extraction(
        files_to_process,
        input_dir=args.input_dir,
        output_dir=args.output_dir,
        delay=args.delay,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
