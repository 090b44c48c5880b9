import math
from typing import Any, Dict, List, Tuple
from pyq.models.filters import QuestionFilter
from pyq.utils.parsing import parse_int

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
MAX_LIMIT = 50

# (column, response key)
PUBLIC_COLUMNS = [
    ("id", "id"),
    ("exam_type", "examType"),
    ("exam_year", "examYear"),
    ("exam_session", "examSession"),
    ("subject", "subject"),
    ("chapter", "chapter"),
    ("topic", "topic"),
    ("concept", "concept"),
    ("question_type", "questionType"),
    ("difficulty", "difficulty"),
    ("question_text", "questionText"),
    ("options", "options"),
]
ANSWER_COLUMNS = [
    ("correct_answer", "correctAnswer"),
    ("solution", "solution"),
]

ORDER_BY = "exam_year DESC, subject ASC, chapter ASC"


def _to_int(value: Any, default: int) -> int:
    parsed = parse_int(value)
    return default if parsed is None else parsed


def clamp_pagination(page: Any = None, limit: Any = None) -> Tuple[int, int]:
    """page >= 1, 1 <= limit <= 50; unparseable values take the defaults"""
    page = max(1, _to_int(page, DEFAULT_PAGE))
    limit = min(MAX_LIMIT, max(1, _to_int(limit, DEFAULT_LIMIT)))
    return page, limit


def select_columns(show_answers: bool) -> List[Tuple[str, str]]:
    """Answer columns are only selected when explicitly requested"""
    return PUBLIC_COLUMNS + ANSWER_COLUMNS if show_answers else list(PUBLIC_COLUMNS)


def query_questions(
    conn,
    question_filter: QuestionFilter,
    page: int = DEFAULT_PAGE,
    limit: int = DEFAULT_LIMIT,
    show_answers: bool = False,
) -> Dict[str, Any]:
    """
    Fetch one page of active questions matching the filter.

    Ordered by year (newest first), then subject and chapter. Pages past
    the end come back empty with the real total.
    """
    page, limit = clamp_pagination(page, limit)
    where_clause, params = question_filter.to_sql()
    columns = select_columns(show_answers)

    cur = conn.cursor()
    try:
        cur.execute(f"SELECT COUNT(*) AS total FROM questions WHERE {where_clause}", params)
        total = cur.fetchone()["total"]

        select_list = ", ".join(f'{column} AS "{key}"' for column, key in columns)
        cur.execute(
            f"SELECT {select_list} FROM questions WHERE {where_clause} "
            f"ORDER BY {ORDER_BY} LIMIT %s OFFSET %s",
            params + [limit, (page - 1) * limit]
        )
        rows = cur.fetchall()
    finally:
        cur.close()

    allowed_keys = [key for _, key in columns]
    questions = [{key: row.get(key) for key in allowed_keys} for row in rows]

    return {
        "questions": questions,
        "pagination": {
            "page": page,
            "limit": limit,
            "total": total,
            "totalPages": math.ceil(total / limit),
        },
    }
