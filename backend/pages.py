"""Handlebars page rendering for the HTML form and result pages."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pybars

TEMPLATES_DIR = Path(__file__).parent / "templates"

_compiler = pybars.Compiler()
_cache: dict[str, Callable] = {}


class PageError(Exception):
    """Raised when a Handlebars template fails to load, compile or render."""


# ── Custom Handlebars helpers ────────────────────────────


def _helper_signed(this, value):
    """{{signed points}}: render an integer with an explicit sign."""
    return f"{int(value):+d}"


_HELPERS: dict[str, Callable] = {
    "signed": _helper_signed,
}


def _compile(name: str) -> Callable:
    compiled = _cache.get(name)
    if compiled is None:
        source = (TEMPLATES_DIR / f"{name}.hbs").read_text(encoding="utf-8")
        compiled = _compiler.compile(source)
        _cache[name] = compiled
    return compiled


def render_page(name: str, context: dict[str, Any]) -> str:
    """Render templates/<name>.hbs with the shared header partial.

    Compiled templates are cached by name.
    """
    try:
        template = _compile(name)
        partials = {"header": _compile("_header")}
        return str(template(context, helpers=_HELPERS, partials=partials))
    except Exception as e:
        raise PageError(f"Template error in {name}: {e}") from e
