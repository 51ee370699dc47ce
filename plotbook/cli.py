"""Entry point for ``plotbook`` / ``python -m plotbook``."""
import logging
import sys

from pydantic import ValidationError


def main() -> None:
    import uvicorn

    from plotbook.core.config import get_settings
    from plotbook.core.logging_config import setup_logging

    try:
        settings = get_settings()
    except ValidationError as exc:
        setup_logging()
        missing = ", ".join(str(error["loc"][0]) for error in exc.errors())
        logging.getLogger("plotbook").error(
            "API_DOMAIN, FRONTEND_DOMAIN and FRONTEND_PATH must be set (invalid or missing: %s)", missing
        )
        sys.exit(1)

    uvicorn.run(
        "plotbook.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.API_PORT,
        reload=False,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
