"""Jinja2 environment for card templates."""

import re
from functools import lru_cache
from typing import Any

from jinja2 import Environment, PackageLoader, StrictUndefined, select_autoescape

# Characters that could end a CSS declaration or break out of a style attribute
_UNSAFE_CSS = re.compile(r"[;{}<>\"\\]")


def css_value(value: Any) -> str:
    """Make a user-authored color or font stack safe inside style=""."""
    if value is None:
        return ""
    return _UNSAFE_CSS.sub("", str(value))


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    env = Environment(
        loader=PackageLoader("paperdream", "rendering/templates"),
        autoescape=select_autoescape(["html"]),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["css"] = css_value
    return env
