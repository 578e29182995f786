#!/usr/bin/env python3
"""
Banner Server.
Answers every HTTP request with the figlet rendering of a fixed banner.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask, Response, jsonify
from werkzeug.exceptions import HTTPException, MethodNotAllowed

from banner_server.config import (
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
    ERROR_MESSAGES,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
)
from banner_server.renderer import BannerError, render_banner

PROJECT_ROOT = Path(__file__).resolve().parent.parent
env_path = PROJECT_ROOT / ".env"
if env_path.exists():
    load_dotenv(env_path)

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
    format=LOG_FORMAT,
    datefmt=LOG_DATE_FORMAT,
)
logger = logging.getLogger(__name__)
logger.debug("Logging configured for banner server module import")

BANNER_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "CONNECT"]

app = Flask(__name__)


@app.errorhandler(BannerError)
def banner_unavailable(error):
    logger.error(f"Banner rendering failed: {error}", exc_info=True)
    return (
        jsonify(
            {"error": ERROR_MESSAGES["banner_unavailable"], "message": str(error)}
        ),
        500,
    )


@app.errorhandler(Exception)
def handle_exception(error):
    if isinstance(error, HTTPException):
        return error
    logger.error(f"Unhandled exception: {error}", exc_info=True)
    return jsonify({"error": ERROR_MESSAGES["internal_error"], "message": str(error)}), 500


def banner_response() -> Response:
    """Build the 200 response carrying the rendered banner.

    Raises:
        BannerError: If the banner could not be rendered
    """
    figure = render_banner()
    return Response(figure, status=200, mimetype="text/plain")


@app.route(
    "/",
    defaults={"path": ""},
    methods=BANNER_METHODS,
    provide_automatic_options=False,
)
@app.route("/<path:path>", methods=BANNER_METHODS, provide_automatic_options=False)
def banner(path: str) -> Response:
    """Serve the banner

    The request itself is never inspected: every method, path, query,
    header and body gets the same answer.

    Returns:
        Plain text response with the rendered banner
    """
    return banner_response()


@app.errorhandler(MethodNotAllowed)
def any_other_method(error):
    """Methods outside BANNER_METHODS (PROPFIND, custom verbs) get the banner too."""
    try:
        return banner_response()
    except BannerError as e:
        return banner_unavailable(e)


def main() -> None:
    """Run the Flask server"""
    port = int(os.environ.get("PORT", DEFAULT_PORT))
    host = os.environ.get("HOST", DEFAULT_HOST)
    debug = os.environ.get("DEBUG", "False").lower() == "true"

    logger.info("=" * 60)
    logger.info("Banner Server")
    logger.info("=" * 60)
    logger.info(f"Server starting on http://{host}:{port}")
    logger.info(f"Debug mode: {debug}")
    logger.info("=" * 60)

    app.run(host=host, port=port, debug=debug)


if __name__ == "__main__":
    main()
