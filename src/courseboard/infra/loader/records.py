"""Turn raw store payloads into entity models."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from courseboard.domain.exceptions import EntityFetchError

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=BaseModel)


def unwrap_collection(kind: str, payload: Any) -> list[Any]:
    """Accept a JSON list of records, or an object keyed by record id."""
    if isinstance(payload, list):
        return payload
    if isinstance(payload, Mapping):
        records = []
        for key, value in payload.items():
            if isinstance(value, Mapping) and "record_id" not in value and "id" not in value:
                value = {"record_id": key, **value}
            records.append(value)
        return records
    raise EntityFetchError(kind, f"expected a list or object, got {type(payload).__name__}")


def flatten_record(record: Mapping[str, Any]) -> dict[str, Any]:
    """Merge a ``{"record_id": ..., "fields": {...}}`` envelope into one flat dict."""
    fields = record.get("fields")
    flat = dict(fields) if isinstance(fields, Mapping) else {
        k: v for k, v in record.items() if k != "record_id"
    }
    record_id = record.get("record_id", record.get("id"))
    if record_id is not None:
        flat["id"] = record_id
    return flat


def parse_records(model: type[E], kind: str, payload: Any) -> list[E]:
    """Validate every record of one collection.

    Records without an identifier, or that are not objects at all, are
    skipped with a warning so one bad row never voids the collection.
    """
    entities: list[E] = []
    for raw in unwrap_collection(kind, payload):
        if not isinstance(raw, Mapping):
            logger.warning("Skipping non-object %s record: %r", kind, raw)
            continue
        try:
            entities.append(model.model_validate(flatten_record(raw)))
        except ValidationError as exc:
            logger.warning("Skipping malformed %s record: %s", kind, exc.errors()[0]["msg"])
    return entities
