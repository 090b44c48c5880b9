import os
from typing import Optional
from google import genai
from google.genai import types
from dotenv import load_dotenv

load_dotenv()

_client = None

def get_gemini_client() -> genai.Client:
    """Get or create singleton Gemini client"""
    global _client
    if _client is None:
        api_key = os.getenv("GEMINI_API_KEY")
        if not api_key:
            raise ValueError("GEMINI_API_KEY environment variable not set")
        _client = genai.Client(api_key=api_key)
    return _client

def generate_content(
    model: str,
    contents: list,
    system_instruction: Optional[str] = None,
    max_output_tokens: Optional[int] = None,
) -> str:
    """
    Single synchronous generate_content call.
    Errors from the API are not retried; they propagate to the caller.
    Returns the response text ("" when the model produced none).
    """
    client = get_gemini_client()
    response = client.models.generate_content(
        model=model,
        contents=contents,
        config=types.GenerateContentConfig(
            system_instruction=system_instruction,
            max_output_tokens=max_output_tokens,
        )
    )
    return response.text if response and response.text else ""
