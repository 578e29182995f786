"""
Health-check handler: reports whether the figlet renderer can be loaded.
"""

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from banner_server.renderer import BannerError, get_renderer  # noqa: E402


def handler(event, context):
    try:
        get_renderer()
    except BannerError as exc:
        print(f"[lambda] health check failed: {exc}", flush=True)
        return {
            "statusCode": 503,
            "headers": {"Content-Type": "text/plain"},
            "body": f"renderer unavailable: {exc}",
        }
    return {
        "statusCode": 200,
        "headers": {
            "Content-Type": "text/plain",
        },
        "body": "ok",
    }
