"""Invoice Maker API server

Usage:
    python api.py
    uvicorn api:app --port 5000
"""

import uvicorn
from config import ApplicationConfig
from src.api.app import create_app

app = create_app(ApplicationConfig)

if __name__ == "__main__":
    uvicorn.run(
        "api:app",
        host=ApplicationConfig.API_HOST,
        port=int(ApplicationConfig.API_PORT),
        reload=bool(ApplicationConfig.API_RELOAD),
        log_level=ApplicationConfig.LOG_LEVEL.lower(),
    )
