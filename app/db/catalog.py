"""Read-only shipment catalog and driver roster, loaded from JSON files.

Both are re-read on every request so edits to the files show up without a
restart.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from app.errors import InternalError
from app.models.metrics import Driver, Shipment

log = logging.getLogger(__name__)


def read_catalog(path: str | Path) -> Any:
    """Raw catalog JSON, as served by the data endpoint."""
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        log.exception("Failed to read shipment catalog at %s", path)
        raise InternalError("Failed to read shipment data") from exc


def load_shipments(path: str | Path) -> list[Shipment]:
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
        return [Shipment(**r) for r in raw]
    except (OSError, json.JSONDecodeError, TypeError, PydanticValidationError) as exc:
        log.exception("Failed to load shipment catalog at %s", path)
        raise InternalError("Failed to calculate metrics") from exc


def load_drivers(path: str | Path) -> list[Driver]:
    """Driver roster, or an empty list when it is absent or unreadable."""
    p = Path(path)
    if not p.exists():
        log.warning("Driver roster not found at %s; reporting 0 drivers", p)
        return []
    try:
        with open(p, encoding="utf-8") as f:
            raw = json.load(f)
        return [Driver(**r) for r in raw]
    except (OSError, json.JSONDecodeError, TypeError, PydanticValidationError):
        log.warning("Driver roster at %s is unreadable; reporting 0 drivers", p, exc_info=True)
        return []
