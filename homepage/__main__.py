"""Run the homepage server: `python -m homepage`."""

import uvicorn

from homepage.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "homepage.api.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
