import os
import time
from pathlib import Path
from typing import List, Dict, Any, Callable
from datetime import datetime, timezone

from pyq.pdf_parser import extract_text_from_pdf
from pyq.services.metadata_service import parse_filename
from pyq.services.gemini_extraction_service import extract_questions
from pyq.models.extraction import ExtractionResult
from pyq.utils.file_utils import ensure_directory


def count_by_subject(questions: List[Dict[str, Any]]) -> Dict[str, int]:
    """Tally questions per subject; records without a string subject count as UNKNOWN"""
    counts: Dict[str, int] = {}
    for question in questions:
        subject = question.get("subject") if isinstance(question, dict) else None
        subject = subject if isinstance(subject, str) and subject else "UNKNOWN"
        counts[subject] = counts.get(subject, 0) + 1
    return counts


def process_pdf(filename: str, input_dir: str) -> ExtractionResult:
    """
    Run one PDF through metadata -> text -> Gemini.
    Any failure raises; the caller decides whether to continue.
    """
    file_path = os.path.join(input_dir, filename)
    print(f"\nProcessing: {filename}")

    # 1. Metadata from filename
    metadata = parse_filename(filename)
    print(f"  Year: {metadata.year}, Session: {metadata.session or 'N/A'}, Type: {metadata.exam_type.value}")

    # 2. Extract text
    print("  Extracting PDF text...")
    pdf_text = extract_text_from_pdf(file_path)
    print(f"  Extracted {len(pdf_text)} characters")

    # 3. Parse questions
    print("  Parsing questions with Gemini...")
    questions = extract_questions(pdf_text, metadata)
    print(f"  Extracted {len(questions)} questions")
    print(f"  Subject distribution: {count_by_subject(questions)}")

    return ExtractionResult(
        filename=filename,
        exam_year=metadata.year,
        exam_session=metadata.session or "",
        exam_type=metadata.exam_type,
        questions=questions,
        extracted_at=datetime.now(timezone.utc).isoformat(),
    )


def save_result(result: ExtractionResult, output_dir: str) -> str:
    """Write <stem>.json next to its siblings in output_dir"""
    ensure_directory(output_dir)
    output_path = os.path.join(output_dir, Path(result.filename).stem + ".json")

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(result.to_json())

    print(f"  Saved to: {output_path}")
    return output_path


def run_extraction(
    filenames: List[str],
    input_dir: str,
    output_dir: str,
    delay: float = 2.0,
    sleep: Callable[[float], None] = time.sleep,
) -> Dict[str, Any]:
    """
    Process files one at a time, pausing between them for the API's
    rate limits. Per-file failures are logged and counted.
    """
    summary = {
        "processed": 0,
        "successful": 0,
        "failed": 0,
        "errors": [],
        "output_dir": output_dir,
    }

    for idx, filename in enumerate(filenames):
        summary["processed"] += 1
        try:
            result = process_pdf(filename, input_dir)
            save_result(result, output_dir)
            summary["successful"] += 1
        except Exception as e:
            print(f"  Error processing {filename}: {e}")
            summary["failed"] += 1
            summary["errors"].append(f"{filename}: {e}")

        if idx < len(filenames) - 1:
            print(f"  Waiting {delay:g} seconds before next file...")
            sleep(delay)

    print("\n--- Summary ---")
    print(f"Processed: {summary['processed']} files")
    print(f"Success: {summary['successful']}")
    print(f"Failed: {summary['failed']}")
    print(f"Output directory: {output_dir}")

    return summary
