"""Run the gateway with uvicorn: python -m adgate"""

import uvicorn

from adgate.core.config import settings


def main() -> None:
    uvicorn.run(
        "adgate.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
