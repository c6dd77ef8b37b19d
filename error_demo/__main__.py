"""Run the API with uvicorn: ``python -m error_demo``."""

import uvicorn

from error_demo.core.config import settings


def main() -> None:
    uvicorn.run(
        "error_demo.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
