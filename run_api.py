"""
Run FastAPI HTTP Server

Serves POST /analyze for the CV Review Assistant. Use: python run_api.py
"""

import os

import uvicorn

from cv_review_ai.config import API_HOST, API_PORT

if __name__ == "__main__":
    # PORT/HOST from the platform take precedence over config
    port = int(os.environ.get("PORT", API_PORT))
    host = os.environ.get("HOST", API_HOST)

    uvicorn.run(
        "cv_review_ai.api.main:app",
        host=host,
        port=port,
        reload=False,
        log_level="info",
    )
