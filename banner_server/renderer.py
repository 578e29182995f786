#!/usr/bin/env python3
"""
Figlet rendering for the banner server.

Wraps pyfiglet behind three small steps (load the font, render text, turn the
figure into text) and keeps one loaded renderer per process.
"""

import logging
from typing import Optional

import pyfiglet

from banner_server.config import BANNER_TEXT, ERROR_MESSAGES, FONT_NAME, FONT_WIDTH

logger = logging.getLogger(__name__)


class BannerError(Exception):
    """Base error for banner rendering failures."""


class RendererUnavailableError(BannerError):
    """The figlet font could not be loaded."""


class RenderError(BannerError):
    """pyfiglet failed to render the given text."""


# Loaded lazily on first use, shared by every request in the process
_renderer: Optional[pyfiglet.Figlet] = None


def load_standard_style() -> pyfiglet.Figlet:
    """Load a renderer using the standard figlet font.

    Raises:
        RendererUnavailableError: If the font is missing or cannot be parsed
    """
    try:
        return pyfiglet.Figlet(font=FONT_NAME, width=FONT_WIDTH)
    except (pyfiglet.FontNotFound, pyfiglet.FontError) as e:
        logger.error(f"Could not load figlet font {FONT_NAME!r}: {e}")
        raise RendererUnavailableError(
            ERROR_MESSAGES["font_not_found"].format(font=FONT_NAME)
        ) from e


def render(renderer: pyfiglet.Figlet, text: str) -> pyfiglet.FigletString:
    """Render text with the given renderer.

    Raises:
        RenderError: If pyfiglet cannot render the text
    """
    try:
        return renderer.renderText(text)
    except pyfiglet.FigletError as e:
        logger.error(f"Rendering {text!r} failed: {type(e).__name__}: {e}")
        raise RenderError(ERROR_MESSAGES["render_failed"]) from e


def to_text(figure: pyfiglet.FigletString) -> str:
    return str(figure)


def get_renderer() -> pyfiglet.Figlet:
    """Return the process-wide renderer, loading it on first call.

    A failed load is not remembered; the next call tries again.
    """
    global _renderer

    if _renderer is not None:
        return _renderer

    logger.info(f"Loading figlet font {FONT_NAME!r}")
    _renderer = load_standard_style()
    return _renderer


def reset_renderer() -> None:
    global _renderer
    _renderer = None


def render_banner(text: str = BANNER_TEXT) -> str:
    """Render text (the banner by default) with the shared renderer."""
    return to_text(render(get_renderer(), text))
