import psycopg2
from psycopg2.extras import RealDictCursor
from pyq.config import config

def get_db_connection():
    """Get PostgreSQL connection with dict rows"""
    if not config.DATABASE_URL:
        raise RuntimeError("DATABASE_URL is not set")
    return psycopg2.connect(config.DATABASE_URL, cursor_factory=RealDictCursor)
