"""
Development server launcher.

Loads the .env file, prints the effective configuration and runs the
API with uvicorn in reload mode.

Usage:
    python scripts/run_dev.py
"""

import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

import uvicorn

from app.core.config import settings

HOST = "0.0.0.0"
PORT = 8000


def _describe() -> list[str]:
    ai = settings.CLOUDFLARE_AI_MODEL if settings.CLOUDFLARE_ACCOUNT_ID and settings.CLOUDFLARE_API_TOKEN \
        else "not configured (food parsing matches frequent foods only)"
    return [
        f"API:       http://localhost:{PORT}/api",
        f"Docs:      http://localhost:{PORT}/docs",
        f"Database:  {settings.DATABASE_HOST}:{settings.DATABASE_PORT}/{settings.DATABASE_DBNAME}",
        f"Owner:     {settings.DEFAULT_USER_EMAIL}",
        f"Workers AI: {ai}",
    ]


if __name__ == "__main__":
    print("=" * 60)
    print(f"{settings.PROJECT_NAME} v{settings.VERSION}")
    print("=" * 60)
    for line in _describe():
        print(line)
    print("=" * 60)

    uvicorn.run("app.main:app", host=HOST, port=PORT, reload=True, log_level=settings.LOG_LEVEL.lower())
