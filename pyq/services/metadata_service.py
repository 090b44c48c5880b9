import re
from pyq.models.extraction import ExamMetadata
from pyq.models.question import ExamType

YEAR_PATTERN = re.compile(r'(\d{4})')
# JEE_Main_2025_April_2_Shift1, JEE_Main_2025_Jan_22
SESSION_PATTERN = re.compile(r'\d{4}_([A-Za-z]+)_(\d+)(?:_Shift(\d+))?')
SIMPLE_SESSION_PATTERN = re.compile(r'\d{4}_([A-Za-z]+_\d+)')

def parse_filename(filename: str) -> ExamMetadata:
    """
    Derive exam metadata from a paper's filename.

    Examples:
        JEE_Main_2025_April_2_Shift1.pdf -> 2025, "April 2 Shift 1", MAIN
        JEE_Main_2007.pdf                -> 2007, None, MAIN
        JEE_Advanced_2023_Paper1.pdf     -> 2023, None, ADVANCED

    Never raises; unknown names give year 0 and no session.
    """
    name = filename.replace(".pdf", "", 1)

    exam_type = ExamType.ADVANCED if "Advanced" in name else ExamType.MAIN

    year_match = YEAR_PATTERN.search(name)
    year = int(year_match.group(1)) if year_match else 0

    session = None
    session_match = SESSION_PATTERN.search(name)
    if session_match:
        month, day, shift = session_match.groups()
        session = f"{month} {day} Shift {shift}" if shift else f"{month} {day}"
    else:
        simple_match = SIMPLE_SESSION_PATTERN.search(name)
        if simple_match:
            session = simple_match.group(1).replace("_", " ", 1)

    return ExamMetadata(year=year, session=session, exam_type=exam_type)
