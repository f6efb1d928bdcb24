# =============================================================================
# record_primitives/debug.py - Pipeline Debugging
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from record_primitives.config import get_settings

logger = logging.getLogger(__name__)


def check(value: Any, pause: bool = False) -> Any:
    """
    Log or break on a value flowing through a pipeline, then return it.

    With pause=True execution stops in the debugger (breakpoint()), unless
    RECORD_PRIMITIVES_ALLOW_BREAKPOINTS is off or RECORD_PRIMITIVES_ENVIRONMENT
    is production, in which case a warning is logged instead. Otherwise
    the value is logged at RECORD_PRIMITIVES_CHECK_LOG_LEVEL.

    Example:
        pipe(filter_by_id(3), check, len)(records)
    """
    settings = get_settings()

    if pause:
        if settings.breakpoints_enabled:
            breakpoint()
        else:
            logger.warning(f"Breakpoint requested but disabled; value: {value!r}")
    else:
        logger.log(getattr(logging, settings.CHECK_LOG_LEVEL), f"{value!r}")

    return value
