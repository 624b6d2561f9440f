"""Run the HTTP server: ``python -m hoyalist``."""
import uvicorn

from hoyalist.core.config import settings


def main() -> None:
    uvicorn.run(
        "hoyalist.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        proxy_headers=True,
    )


if __name__ == "__main__":
    main()
