from __future__ import annotations
from typing import Any, Dict, Mapping, Optional
import re

from .models import FIELD_NAMES

ROUTE_PARAM_RE = re.compile(r":(\w+)")

def without_id(record: Mapping[str, Any]) -> Dict[str, Any]:
    """Copy of record with `id` dropped; the server assigns it on create."""
    return {k: v for k, v in record.items() if k != "id"}

def with_id(animal_id: str, values: Mapping[str, Any]) -> Dict[str, Any]:
    """Full-replacement payload: the original id merged with current form values."""
    return {"id": animal_id, **without_id(values)}

def pick_fields(record: Mapping[str, Any]) -> Dict[str, str]:
    """The four editable fields of a record; missing ones become ''."""
    return {name: str(record.get(name) or "") for name in FIELD_NAMES}

def compile_route(pattern: str) -> re.Pattern[str]:
    """
    '/animales/editar/:id' -> regex with a named group per ':param'.
    Params match a single non-empty path segment.
    """
    return re.compile("^" + ROUTE_PARAM_RE.sub(r"(?P<\1>[^/]+)", pattern) + "$")

def normalize_path(path: Optional[str]) -> str:
    """Strip query/fragment and trailing slashes; '' and None become '/'."""
    if not path:
        return "/"
    path = path.split("?", 1)[0].split("#", 1)[0]
    path = "/" + path.strip("/")
    return path
