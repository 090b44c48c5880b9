"""
PDF Parser Module
Extracts plain text from exam-paper PDFs using pdfminer.six
"""
import os
from pathlib import Path
from typing import List
from io import StringIO

from pdfminer.high_level import extract_text_to_fp
from pdfminer.layout import LAParams


def extract_text_from_pdf(pdf_path: str) -> str:
    """
    Extract text from a PDF file

    Args:
        pdf_path: Path to the PDF file

    Returns:
        Extracted text as string

    Raises:
        FileNotFoundError: If PDF file doesn't exist
        pdfminer errors for corrupt files are not caught
    """
    if not os.path.exists(pdf_path):
        raise FileNotFoundError(f"PDF file not found: {pdf_path}")

    output_string = StringIO()

    with open(pdf_path, 'rb') as pdf_file:
        extract_text_to_fp(
            pdf_file,
            output_string,
            laparams=LAParams(),
        )

    return output_string.getvalue()


def list_pdfs_in_folder(folder_path: str) -> List[str]:
    """
    List PDF file names in a folder, sorted

    Args:
        folder_path: Path to folder

    Returns:
        File names (not full paths) of the PDFs found

    Raises:
        FileNotFoundError: If folder doesn't exist
        NotADirectoryError: If path is not a directory
    """
    if not os.path.exists(folder_path):
        raise FileNotFoundError(f"Folder not found: {folder_path}")

    if not os.path.isdir(folder_path):
        raise NotADirectoryError(f"Path is not a directory: {folder_path}")

    return sorted(p.name for p in Path(folder_path).glob("*.pdf") if p.is_file())
