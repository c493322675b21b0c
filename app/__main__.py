# =============================================================================
# app/__main__.py - Server Runner
# =============================================================================
# Runs the API with uvicorn on HOST:PORT from settings.
#
# Usage:
#   python -m app
#   storefront-api
# =============================================================================

import uvicorn

from app.config import settings


def main() -> None:
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level="debug" if settings.DEBUG else "info",
    )


if __name__ == "__main__":
    main()
