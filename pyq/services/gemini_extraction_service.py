from typing import Any, Dict, List
import json
import re
from pyq.config import config
from pyq.clients.gemini_client import generate_content
from pyq.models.extraction import ExamMetadata

SYSTEM_PROMPT = """You are an expert at parsing JEE exam papers. Your task is to extract individual questions from the provided exam paper text and structure them as JSON.

For JEE Main papers:
- Questions 1-20 are typically Physics (may include 5 numerical type)
- Questions 21-25 are typically Physics numerical
- Questions 26-45 are typically Chemistry (may include 5 numerical type)
- Questions 46-50 are typically Chemistry numerical
- Questions 51-70 are typically Mathematics (may include 5 numerical type)
- Questions 71-75 are typically Mathematics numerical

However, some papers have different distributions. Use context clues (formulas, terminology) to determine the subject:
- Physics: mechanics, waves, optics, thermodynamics, electromagnetism, modern physics
- Chemistry: organic, inorganic, physical chemistry, periodic table, reactions
- Mathematics: calculus, algebra, trigonometry, coordinate geometry, vectors, probability

Question types:
- MCQ_SINGLE: Multiple choice with single correct answer (options A, B, C, D)
- MCQ_MULTIPLE: Multiple correct answers possible
- NUMERICAL: Answer is a decimal/integer value (no options)
- INTEGER: Answer is a single integer

When extracting:
1. Preserve mathematical notation as much as possible (use LaTeX: inline $...$)
2. Include ALL options for MCQ questions
3. Extract the correct answer from the answer key section if present
4. Mark difficulty based on complexity: EASY (direct formula), MEDIUM (multi-step), HARD (complex reasoning)
5. Identify the chapter/topic when possible"""

# First '[' through the last ']'
JSON_ARRAY_PATTERN = re.compile(r'\[.*\]', re.DOTALL)


def build_user_prompt(text: str, metadata: ExamMetadata, max_chars: int = None) -> str:
    """Embed exam metadata and the (truncated) paper text in the extraction request."""
    if max_chars is None:
        max_chars = config.MAX_TEXT_CHARS

    session = f" ({metadata.session})" if metadata.session else ""

    return f"""Parse the following JEE {metadata.exam_type.value} {metadata.year}{session} exam paper text and extract all questions as structured JSON.

Return ONLY a valid JSON array of question objects. Each question should have:
- questionNumber: number
- subject: "PHYSICS" | "CHEMISTRY" | "MATHEMATICS"
- questionText: string (the full question text, preserve math notation)
- options: array of {{id: "A"|"B"|"C"|"D", text: string}} (only for MCQ)
- correctAnswer: string (the answer - could be "A", "B,C", "3.14", etc.)
- questionType: "MCQ_SINGLE" | "MCQ_MULTIPLE" | "NUMERICAL" | "INTEGER"
- chapter: string (if determinable, e.g., "Mechanics", "Organic Chemistry", "Calculus")
- topic: string (if determinable, e.g., "Projectile Motion", "Aldehydes", "Integration")
- concept: string (specific concept, e.g., "Range of projectile", "Aldol condensation")
- difficulty: "EASY" | "MEDIUM" | "HARD"
- skills: array of applicable skills from ["CONCEPTUAL", "NUMERICAL", "APPLICATION", "ANALYTICAL", "DERIVATION", "GRAPHICAL"]

If you cannot determine an answer key, set correctAnswer to "UNKNOWN".
If the text is too garbled or unreadable, return an empty array [].

EXAM PAPER TEXT:
{text[:max_chars]}"""


def extract_json_array(response_text: str) -> List[Dict[str, Any]]:
    """
    Pull the question array out of a model response that may carry
    prose around it. Anything that isn't a JSON array gives [].
    """
    if not response_text:
        return []

    json_match = JSON_ARRAY_PATTERN.search(response_text)
    if not json_match:
        print("No JSON array found in Gemini response")
        return []

    try:
        questions = json.loads(json_match.group(0))
    except json.JSONDecodeError as e:
        print(f"Failed to parse JSON array from Gemini response: {e}")
        print(f"Gemini response (first 500 chars): {response_text[:500]}")
        return []

    if not isinstance(questions, list):
        return []
    return questions


def extract_questions(text: str, metadata: ExamMetadata) -> List[Dict[str, Any]]:
    """
    Extract structured questions from exam paper text using Gemini.
    Errors from the API call propagate; bad output gives [].
    """
    if not text or not text.strip():
        print("No text to parse, skipping Gemini call")
        return []

    response_text = generate_content(
        model=config.GEMINI_GENERATION_MODEL,
        contents=[build_user_prompt(text, metadata)],
        system_instruction=SYSTEM_PROMPT,
        max_output_tokens=config.MAX_OUTPUT_TOKENS,
    )
    return extract_json_array(response_text)
