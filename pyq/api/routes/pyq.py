from fastapi import APIRouter
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from typing import Optional
from pyq.clients.postgres_client import get_db_connection
from pyq.services.filter_service import build_question_filter
from pyq.services.question_service import query_questions, clamp_pagination
from pyq.services.facet_service import get_cached_filter_facets

router = APIRouter(prefix="/api/pyq")

@router.get("")
def list_questions(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    subject: Optional[str] = None,
    examType: Optional[str] = None,
    year: Optional[str] = None,
    difficulty: Optional[str] = None,
    chapter: Optional[str] = None,
    topic: Optional[str] = None,
    questionType: Optional[str] = None,
    search: Optional[str] = None,
    showAnswers: Optional[str] = None,
):
    """
    Paginated PYQ browser. Invalid filter values are ignored;
    answers are only included with showAnswers=true.
    """
    conn = None
    try:
        page_num, page_size = clamp_pagination(page, limit)
        question_filter = build_question_filter(
            subject=subject,
            exam_type=examType,
            year=year,
            difficulty=difficulty,
            chapter=chapter,
            topic=topic,
            question_type=questionType,
            search=search,
        )

        conn = get_db_connection()
        result = query_questions(
            conn,
            question_filter,
            page=page_num,
            limit=page_size,
            show_answers=showAnswers == "true",
        )

        result["filters"] = {
            "subject": subject,
            "examType": examType,
            "year": year,
            "difficulty": difficulty,
            "chapter": chapter,
            "topic": topic,
            "questionType": questionType,
            "search": search,
        }
        return JSONResponse(content=jsonable_encoder(result))

    except Exception as e:
        print(f"Error fetching PYQ: {e}")
        return JSONResponse(status_code=500, content={"error": "Failed to fetch questions"})
    finally:
        if conn is not None:
            conn.close()

@router.get("/filters")
def list_filters(subject: Optional[str] = None, examType: Optional[str] = None):
    """Facet counts for the filter controls"""
    conn = None
    try:
        conn = get_db_connection()
        facets = get_cached_filter_facets(conn, subject=subject, exam_type=examType)
        return JSONResponse(content=jsonable_encoder(facets))

    except Exception as e:
        print(f"Error fetching PYQ filters: {e}")
        return JSONResponse(status_code=500, content={"error": "Failed to fetch filters"})
    finally:
        if conn is not None:
            conn.close()
