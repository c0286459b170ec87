"""Run the lab dashboard under uvicorn.

Usage:
    python -m cicd_lab.dashboard [--host HOST] [--port PORT] [--api-url URL]
"""

from __future__ import annotations

import argparse

import uvicorn

from cicd_lab.dashboard.config import DashboardSettings
from cicd_lab.dashboard.main import create_app


def main(argv: list[str] | None = None) -> None:
    settings = DashboardSettings()

    parser = argparse.ArgumentParser(description="K8s CI/CD lab dashboard")
    parser.add_argument("--host", default=settings.host, help=f"Bind address (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Listen port (default: {settings.port})")
    parser.add_argument("--api-url", default=None, help=f"Backend base URL (default: {settings.api_url})")
    args = parser.parse_args(argv)

    if args.api_url:
        settings = DashboardSettings(api_url=args.api_url)

    uvicorn.run(
        create_app(settings),
        host=args.host,
        port=args.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
