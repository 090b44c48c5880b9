import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    # Gemini Configuration
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
    GEMINI_GENERATION_MODEL = os.getenv("GEMINI_GENERATION_MODEL", "gemini-2.5-flash")
    MAX_OUTPUT_TOKENS = int(os.getenv("MAX_OUTPUT_TOKENS", "16000"))
    MAX_TEXT_CHARS = int(os.getenv("MAX_TEXT_CHARS", "100000"))

    # Extraction Configuration
    EXAM_PAPERS_DIR = os.getenv("EXAM_PAPERS_DIR", os.path.join(os.getcwd(), "exam papers"))
    OUTPUT_DIR = os.getenv("OUTPUT_DIR", os.path.join(os.getcwd(), "scripts", "extracted"))
    EXTRACTION_DELAY = float(os.getenv("EXTRACTION_DELAY", "2"))  # seconds between files

    # Database Configuration
    DATABASE_URL = os.getenv("DATABASE_URL")

    # Redis Configuration
    REDIS_HOST = os.getenv("REDIS_HOST", "localhost")
    REDIS_PORT = int(os.getenv("REDIS_PORT", "6379"))
    REDIS_PASSWORD = os.getenv("REDIS_PASSWORD", "") or None
    REDIS_ENABLED = os.getenv("REDIS_ENABLED", "true").lower() == "true"
    CACHE_TTL = int(os.getenv("CACHE_TTL", "3600"))  # 1 hour default

    # CORS Configuration
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    CORS_ALLOW_CREDENTIALS = os.getenv("CORS_ALLOW_CREDENTIALS", "true").lower() == "true"
    CORS_ALLOW_METHODS = ["*"] if os.getenv("CORS_ALLOW_METHODS", "*") == "*" else os.getenv("CORS_ALLOW_METHODS", "*").split(",")
    CORS_ALLOW_HEADERS = ["*"] if os.getenv("CORS_ALLOW_HEADERS", "*") == "*" else os.getenv("CORS_ALLOW_HEADERS", "*").split(",")

    @classmethod
    def validate(cls):
        """Validate required configuration"""
        if not cls.GEMINI_API_KEY:
            raise ValueError("GEMINI_API_KEY is required")
        return True

config = Config()
