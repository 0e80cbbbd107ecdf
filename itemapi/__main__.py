"""
CLI entry point for the API server.

Usage:
    # Start the server with settings from the environment / .env
    python -m itemapi

    # Override the bind address
    python -m itemapi --host 0.0.0.0 --port 8080

Exit codes: 0 after a graceful shutdown, 1 on a startup fault.
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from itemapi.core.config import ConfigurationError, load_settings
from itemapi.shared.logging import configure_logging, resolve_level

logger = logging.getLogger("itemapi")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load settings, build the app and serve it until shutdown.

    Args:
        argv: Command-line arguments; defaults to ``sys.argv[1:]``.

    Returns:
        Process exit code: 0 after a graceful shutdown, 1 when
        configuration or application startup fails.
    """
    parser = argparse.ArgumentParser(description="Item API server")
    parser.add_argument("--host", default=None, help="Bind address (default: HOST)")
    parser.add_argument("--port", type=int, default=None, help="Bind port (default: PORT)")
    args = parser.parse_args(argv)

    configure_logging()
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        logger.error("Failed to load application configuration: %s", exc.message)
        return 1

    import uvicorn

    from itemapi.main import create_app

    try:
        app = create_app(settings)
    except Exception:
        logger.exception("Failed to start the server")
        return 1

    host = args.host or settings.host
    port = args.port or settings.port
    logger.info("Server running at http://%s:%d", host, port)
    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=logging.getLevelName(resolve_level(settings.log_level)).lower(),
        server_header=False,
    )
    logger.info("Server closed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
