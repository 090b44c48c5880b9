import pytest


class FakeCursor:
    """Returns canned result sets, one per execute() call, in order."""

    def __init__(self, results):
        self.results = list(results)
        self.executed = []
        self.closed = False
        self._current = []

    def execute(self, sql, params=None):
        self.executed.append((sql, list(params) if params is not None else None))
        self._current = self.results.pop(0) if self.results else []

    def fetchone(self):
        return self._current[0] if self._current else None

    def fetchall(self):
        return list(self._current)

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, results=()):
        self.cursor_obj = FakeCursor(results)
        self.closed = False

    def cursor(self):
        return self.cursor_obj

    def close(self):
        self.closed = True


@pytest.fixture
def fake_conn():
    """Factory for a fake psycopg2 connection with canned result sets"""
    def _make(*results):
        return FakeConnection(results)
    return _make


@pytest.fixture
def sample_questions():
    return [
        {"questionNumber": 1, "subject": "PHYSICS", "questionText": "A ball is thrown...",
         "options": [{"id": "A", "text": "10 m"}, {"id": "B", "text": "20 m"}],
         "correctAnswer": "A", "questionType": "MCQ_SINGLE"},
        {"questionNumber": 26, "subject": "CHEMISTRY", "questionText": "Identify the product",
         "correctAnswer": "UNKNOWN", "questionType": "MCQ_SINGLE"},
        {"questionNumber": 71, "subject": "MATHEMATICS", "questionText": "Find the integral",
         "correctAnswer": "3", "questionType": "INTEGER"},
        {"questionNumber": 72, "subject": "MATHEMATICS", "questionText": "Evaluate the limit",
         "correctAnswer": "0.5", "questionType": "NUMERICAL"},
    ]


@pytest.fixture
def question_row():
    """One questions-table row as selected (aliased to response keys)"""
    return {
        "id": "q1", "examType": "MAIN", "examYear": 2024, "examSession": "Jan 27 Shift 1",
        "subject": "PHYSICS", "chapter": "Mechanics", "topic": "Projectile Motion",
        "concept": "Range", "questionType": "MCQ_SINGLE", "difficulty": "EASY",
        "questionText": "A ball is thrown...", "options": [{"id": "A", "text": "10 m"}],
        "correctAnswer": "A", "solution": "Use R = u^2 sin 2θ / g",
    }


@pytest.fixture
def facet_rows():
    """Result sets for the six facet queries, in execution order"""
    return [
        [{"exam_year": 2025, "count": 3}, {"exam_year": 2024, "count": 5}],
        [
            {"chapter": "Mechanics", "subject": "PHYSICS", "count": 4},
            {"chapter": "Calculus", "subject": "MATHEMATICS", "count": 3},
            {"chapter": "Optics", "subject": "PHYSICS", "count": 1},
        ],
        [{"question_type": "MCQ_SINGLE", "count": 6}, {"question_type": "NUMERICAL", "count": 2}],
        [{"difficulty": "EASY", "count": 5}, {"difficulty": "HARD", "count": 3}],
        [{"exam_type": "MAIN", "count": 40}, {"exam_type": "ADVANCED", "count": 12}],
        [{"subject": "PHYSICS", "count": 5}, {"subject": "MATHEMATICS", "count": 3}],
    ]
