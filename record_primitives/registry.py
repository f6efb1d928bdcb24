# =============================================================================
# record_primitives/registry.py - Primitive Registry
# =============================================================================
# Name -> function lookup for every exported primitive. PRIMITIVES is the
# aggregate object consumers can import instead of individual names; it holds
# the same function objects as the module-level exports.
#
# Names are the camelCase names the primitives are known by in pipeline
# definitions (e.g. "filterByProp"), so a pipeline stored as a list of names
# can be resolved with require_primitive().
# =============================================================================

from __future__ import annotations

import inspect
import logging
from typing import Callable

from record_primitives.exceptions import DuplicatePrimitiveError, PrimitiveNotFoundError

logger = logging.getLogger(__name__)


# Global registry: name -> primitive function
PRIMITIVES: dict[str, Callable] = {}

# name -> category ("predicates", "accessors", ...)
_CATEGORIES: dict[str, str] = {}


def register_primitive(name: str, fn: Callable, category: str = "misc") -> Callable:
    """
    Register a primitive under a name.

    Raises:
        DuplicatePrimitiveError: If the name is already taken
    """
    if name in PRIMITIVES:
        raise DuplicatePrimitiveError(name)

    PRIMITIVES[name] = fn
    _CATEGORIES[name] = category
    logger.debug(f"Registered primitive '{name}' ({category})")
    return fn


def get_primitive(name: str) -> Callable | None:
    """Get a primitive by name, or None."""
    return PRIMITIVES.get(name)


def require_primitive(name: str) -> Callable:
    """
    Get a primitive by name.

    Raises:
        PrimitiveNotFoundError: If no primitive has that name
    """
    fn = PRIMITIVES.get(name)
    if fn is None:
        raise PrimitiveNotFoundError(name, available=sorted(PRIMITIVES))
    return fn


def list_primitives(category: str | None = None) -> list[str]:
    """
    List registered primitive names.

    Args:
        category: If provided, only names in that category

    Returns:
        Names in registration order
    """
    if category is None:
        return list(PRIMITIVES.keys())
    return [name for name in PRIMITIVES if _CATEGORIES[name] == category]


def export_primitives_documentation() -> str:
    """
    Export documentation for all primitives in markdown format.

    Each entry uses the first paragraph of the primitive's docstring.
    """
    lines = ["# record_primitives\n"]

    categories: dict[str, list[str]] = {}
    for name, category in _CATEGORIES.items():
        categories.setdefault(category, []).append(name)

    for category, names in sorted(categories.items()):
        lines.append(f"\n## {category.upper()}\n")

        for name in sorted(names):
            doc = inspect.getdoc(PRIMITIVES[name]) or ""
            summary = doc.split("\n\n")[0].replace("\n", " ").strip()
            lines.append(f"- `{name}`: {summary}" if summary else f"- `{name}`")

    return "\n".join(lines)
