"""
Start the Discover Zimbabwe API with uvicorn.

Usage:
    APP_ENV=development python run_fastapi.py

Or with uvicorn directly:
    uvicorn discoverzim.fastapi_app:app --port 5001 --reload
"""

import os

import uvicorn
from dotenv import load_dotenv

load_dotenv()

APP_PATH = "discoverzim.fastapi_app:app"

if __name__ == "__main__":
    env = os.getenv("APP_ENV", "development")
    uvicorn.run(
        APP_PATH,
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", 5001)),
        reload=env == "development",
        log_level="info" if env == "development" else "warning",
    )
