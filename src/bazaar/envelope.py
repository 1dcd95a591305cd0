"""The error envelope every controller emits on a data-access failure.

    {"success": false, "message": <str>, "error": <str>}

with status 500 and exactly one record on the ``bazaar`` logger.
"""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger("bazaar")


def error_envelope(message: str, error: BaseException | str) -> dict[str, Any]:
    return {"success": False, "message": message, "error": str(error)}


def send_error(response: Any, message: str, error: BaseException) -> Any:
    """Log the failure once and respond 500 with the envelope."""
    logger.error("%s: %s", message, error, exc_info=error)
    return response.status(500).send(error_envelope(message, error))
