#!/usr/bin/env python3
"""
Configuration constants for the banner server.
"""

# Banner
BANNER_TEXT = "Hello, Fermyon on Azure AKS!"
FONT_NAME = "standard"
# Wide enough that the banner renders as one row of glyphs, never wrapped
FONT_WIDTH = 1000

# Default values
DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_LOG_LEVEL = "INFO"

# Error messages (user-friendly, no internal details)
ERROR_MESSAGES = {
    "banner_unavailable": "Banner unavailable",
    "internal_error": "Internal server error",
    "font_not_found": "Font '{font}' could not be loaded",
    "render_failed": "Failed to render banner text",
}

# Logging configuration
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
