#!/usr/bin/env python3
"""Main entry point for the task manager."""

import logging
import sys
import os
from pathlib import Path
import uvicorn

# Add src to path
sys.path.insert(0, str(Path(__file__).parent))

from config import settings


def _log_handlers():
    handlers = [logging.StreamHandler()]
    if settings.log_file:
        log_dir = os.path.dirname(settings.log_file)
        if log_dir:
            Path(log_dir).mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(settings.log_file))
    return handlers


# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=_log_handlers()
)

logger = logging.getLogger(__name__)


def run_http_server():
    """Run the HTTP API server."""
    logger.info(f"Starting HTTP server on {settings.api_host}:{settings.api_port}")

    uvicorn.run(
        "api.http_server:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower()
    )


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Task Manager API")
    parser.add_argument(
        "--host",
        default=settings.api_host,
        help=f"HTTP server host (default: {settings.api_host})"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.api_port,
        help=f"HTTP server port (default: {settings.api_port})"
    )
    parser.add_argument(
        "--database-url",
        default=settings.database_url,
        help="SQLAlchemy database URL (default: from settings)"
    )

    args = parser.parse_args()

    settings.api_host = args.host
    settings.api_port = args.port
    settings.database_url = args.database_url

    try:
        run_http_server()
    except KeyboardInterrupt:
        logger.info("Shutting down task manager...")
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
