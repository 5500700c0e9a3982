"""Run the API with uvicorn: `python -m portfolio`."""

import uvicorn

from portfolio.config import settings


def main() -> None:
    uvicorn.run(
        "portfolio.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
