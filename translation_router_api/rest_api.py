"""
Entry point for launching the translation‑router REST server.

The script selects a WSGI server (Flask, Gunicorn or Waitress) based on
command‑line flags **or** the ``TRANSLATION_ROUTER_SERVER_TYPE`` environment
variable, then starts it on the host and port taken from
``translation_router_api.base.constants``.

Typical usage
---------------
>>> python -m translation_router_api.rest_api --gunicorn
>>> python -m translation_router_api.rest_api --waitress
>>> python -m translation_router_api.rest_api      # development server (Flask)
"""

import logging
import argparse

from translation_router_api.core.server import (
    run_flask_server,
    run_gunicorn_server,
    run_waitress_server,
)
from translation_router_api.base.constants import (
    SERVER_TYPE,
    SERVER_PORT,
    SERVER_HOST,
    SERVER_WORKERS_COUNT,
    SERVER_THREADS_COUNT,
    SERVER_WORKERS_CLASS,
    RUN_IN_DEBUG_MODE,
    TRANSLATION_ROUTER_API_TIMEOUT,
)

logger = logging.getLogger(__name__)


def _parse_args(argv=None) -> argparse.Namespace:
    """
    Parse command‑line arguments.

    Defaults are taken from the ``translation_router_api.base.constants``
    module.
    """
    parser = argparse.ArgumentParser(
        description="Start Translation‑Router API with the chosen WSGI server"
    )
    parser.add_argument(
        "--gunicorn",
        action="store_true",
        help="Force using Gunicorn (production)",
    )
    parser.add_argument(
        "--waitress",
        action="store_true",
        help="Force using Waitress (production, Windows‑friendly)",
    )
    parser.add_argument(
        "--host",
        default=SERVER_HOST,
        help="Interface to bind to (default: %(default)s)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=SERVER_PORT,
        help="Port number (default: %(default)s)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=SERVER_WORKERS_COUNT,
        help="Number of worker processes (Gunicorn only)",
    )
    parser.add_argument(
        "--threads",
        type=int,
        default=SERVER_THREADS_COUNT,
        help="Number of threads (Gunicorn/Waitress)",
    )
    return parser.parse_args(argv)


def _choose_server(args: argparse.Namespace) -> str:
    # CLI flags have priority over the ``SERVER_TYPE`` env variable
    if args.gunicorn:
        return "gunicorn"
    if args.waitress:
        return "waitress"
    return SERVER_TYPE


def main(argv=None) -> None:
    """
    Select the server backend and start it.
    """
    args = _parse_args(argv)
    server_choice = _choose_server(args)

    logger.info("Starting Translation‑Router API with %s", server_choice)

    try:
        if server_choice == "gunicorn":
            run_gunicorn_server(
                host=args.host,
                port=args.port,
                workers=args.workers,
                threads=args.threads,
                timeout=TRANSLATION_ROUTER_API_TIMEOUT,
                log_level="debug" if RUN_IN_DEBUG_MODE else "info",
                worker_class=SERVER_WORKERS_CLASS,
            )
        elif server_choice == "waitress":
            run_waitress_server(
                host=args.host,
                port=args.port,
                threads=args.threads,
            )
        else:
            run_flask_server(host=args.host, port=args.port, debug=RUN_IN_DEBUG_MODE)
    except Exception:
        logger.exception("Failed to start the server")
        raise


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    main()
