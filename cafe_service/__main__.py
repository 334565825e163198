from __future__ import annotations

import uvicorn

from .config import DEFAULT_SERVICE_CONFIG, ServiceConfig
from .logging_config import resolve_level


def main(config: ServiceConfig = DEFAULT_SERVICE_CONFIG) -> None:
    uvicorn.run(
        "cafe_service.app:app",
        host=config.host,
        port=config.port,
        log_level=resolve_level(config.log_level),
    )


if __name__ == "__main__":
    main()
