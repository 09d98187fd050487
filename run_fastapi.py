"""
Start the chat & task API with uvicorn.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn chattask.fastapi_app:app --host 0.0.0.0 --port 8080 --reload

HOST, PORT and APP_ENV come from the environment (or .env).
"""

import uvicorn

from chattask.config.settings import get_config

if __name__ == "__main__":
    config = get_config()
    reload = config.APP_ENV == "development"

    print(f"Starting chattask in {config.APP_ENV} mode on http://{config.HOST}:{config.PORT}")
    print(f"OpenAPI docs: http://{config.HOST}:{config.PORT}/docs")

    uvicorn.run(
        "chattask.fastapi_app:app",
        host=config.HOST,
        port=config.PORT,
        reload=reload,
        log_level=config.LOG_LEVEL.lower() if reload else "warning",
    )
