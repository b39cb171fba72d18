"""Server entry point — `python -m app` or the `person-service` console script.

Invariants:
    - The served app is built from the same Settings used for host/port
"""

import uvicorn

from app.config import get_settings
from app.main import create_app


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
