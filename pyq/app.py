from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pyq.config import config
from pyq.clients.postgres_client import get_db_connection
from pyq.api.routes.pyq import router as pyq_router

app = FastAPI(
    title="PYQ Browser Service",
    description="Filtered browsing of JEE previous-year questions",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=config.CORS_ALLOW_CREDENTIALS,
    allow_methods=config.CORS_ALLOW_METHODS,
    allow_headers=config.CORS_ALLOW_HEADERS,
)

app.include_router(pyq_router)


# Health check endpoint
@app.get("/health")
def health_check():
    """Health check endpoint"""
    conn = None
    try:
        conn = get_db_connection()
        cur = conn.cursor()
        cur.execute("SELECT 1")
        cur.close()

        return {
            "ok": True,
            "status": "healthy",
            "service": "pyq",
        }
    except Exception as e:
        return {
            "ok": False,
            "status": "unhealthy",
            "error": str(e),
        }
    finally:
        if conn is not None:
            conn.close()


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint with API information"""
    return {
        "service": "PYQ Browser Service",
        "version": "1.0.0",
        "endpoints": {
            "health": "GET /health",
            "questions": "GET /api/pyq?page=1&limit=20&subject=PHYSICS",
            "filters": "GET /api/pyq/filters?subject=PHYSICS&examType=MAIN",
        }
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
