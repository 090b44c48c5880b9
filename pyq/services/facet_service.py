from typing import Any, Dict, List, Optional, Tuple
from pyq.clients.redis_client import build_cache_key, cache_get, cache_set

FACET_CACHE_PREFIX = "pyq:filters"


def _base_where(subject: Optional[str], exam_type: Optional[str]) -> Tuple[str, List[Any]]:
    conditions = ["is_active = %s"]
    params: List[Any] = [True]
    if subject:
        conditions.append("subject = %s")
        params.append(subject)
    if exam_type:
        conditions.append("exam_type = %s")
        params.append(exam_type)
    return " AND ".join(conditions), params


def _group_counts(cur, columns: List[str], where: str, params: List[Any], order_by: str = None) -> List[Dict[str, Any]]:
    column_list = ", ".join(columns)
    sql = f"SELECT {column_list}, COUNT(*) AS count FROM questions WHERE {where} GROUP BY {column_list}"
    if order_by:
        sql += f" ORDER BY {order_by}"
    cur.execute(sql, params)
    return [dict(row) for row in cur.fetchall()]


def group_chapters_by_subject(rows: List[Dict[str, Any]]) -> Dict[str, List[Dict[str, Any]]]:
    """Regroup (chapter, subject) counts into {subject: [{chapter, count}]} keeping row order"""
    chapters_by_subject: Dict[str, List[Dict[str, Any]]] = {}
    for row in rows:
        chapters_by_subject.setdefault(row["subject"], []).append({
            "chapter": row["chapter"],
            "count": row["count"],
        })
    return chapters_by_subject


def get_filter_facets(conn, subject: Optional[str] = None, exam_type: Optional[str] = None) -> Dict[str, Any]:
    """
    Value counts for each filter control, over active questions.

    subject/exam_type narrow every facet except examTypes, which is always
    counted over the whole active set so the exam-type options stay put.
    """
    where, params = _base_where(subject, exam_type)

    cur = conn.cursor()
    try:
        years = _group_counts(cur, ["exam_year"], where, params, order_by="exam_year DESC")
        chapters = _group_counts(cur, ["chapter", "subject"], where, params, order_by="count DESC")
        question_types = _group_counts(cur, ["question_type"], where, params)
        difficulties = _group_counts(cur, ["difficulty"], where, params)
        exam_types = _group_counts(cur, ["exam_type"], "is_active = %s", [True])
        subjects = _group_counts(cur, ["subject"], where, params)
    finally:
        cur.close()

    return {
        "years": [{"year": r["exam_year"], "count": r["count"]} for r in years],
        "chapters": group_chapters_by_subject(chapters),
        "questionTypes": [{"type": r["question_type"], "count": r["count"]} for r in question_types],
        "difficulties": [{"level": r["difficulty"], "count": r["count"]} for r in difficulties],
        "examTypes": [{"type": r["exam_type"], "count": r["count"]} for r in exam_types],
        "subjects": [{"subject": r["subject"], "count": r["count"]} for r in subjects],
    }


def get_cached_filter_facets(conn, subject: Optional[str] = None, exam_type: Optional[str] = None) -> Dict[str, Any]:
    """Read-through cache around get_filter_facets (CACHE_TTL, default 1 hour)"""
    cache_key = build_cache_key(FACET_CACHE_PREFIX, subject, exam_type)

    cached = cache_get(cache_key)
    if cached:
        return cached

    facets = get_filter_facets(conn, subject, exam_type)
    cache_set(cache_key, facets)
    return facets
