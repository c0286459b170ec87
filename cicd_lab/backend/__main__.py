"""Run the lab backend under uvicorn.

Usage:
    python -m cicd_lab.backend [--host HOST] [--port PORT]
"""

from __future__ import annotations

import argparse

import uvicorn

from cicd_lab.backend.config import Settings
from cicd_lab.backend.main import create_app


def main(argv: list[str] | None = None) -> None:
    settings = Settings()

    parser = argparse.ArgumentParser(description="K8s CI/CD lab backend")
    parser.add_argument("--host", default=settings.host, help=f"Bind address (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Listen port (default: {settings.port})")
    args = parser.parse_args(argv)

    uvicorn.run(
        create_app(settings),
        host=args.host,
        port=args.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
