"""Run the bridge with uvicorn: ``python -m bridge``."""

from __future__ import annotations

import uvicorn

from bridge.config import settings
from bridge.utils.logging import setup_logging


def run_server() -> None:
    setup_logging()
    uvicorn.run(
        "bridge.main:app",
        host=settings.bridge_host,
        port=settings.bridge_port,
        log_level=settings.bridge_log_level.lower(),
    )


if __name__ == "__main__":
    run_server()
