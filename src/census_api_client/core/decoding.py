"""Conversion of raw Census records into caller-selected types."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from .errors import CensusProtocolError

JsonObject = dict[str, Any]
ItemModel = type | Callable[[JsonObject], Any]


def convert_item(item: object, model: ItemModel | None = None) -> Any:
    """Convert one raw record.

    ``None`` keeps the raw value, a dataclass type is built from the keys
    matching its init fields, any other callable receives the raw value.
    """

    if model is None:
        return item
    if isinstance(model, type) and dataclasses.is_dataclass(model):
        if not isinstance(item, Mapping):
            raise CensusProtocolError(
                f"cannot build {model.__name__} from {type(item).__name__}"
            )
        names = {f.name for f in dataclasses.fields(model) if f.init}
        return model(**{key: value for key, value in item.items() if key in names})
    return model(item)


def convert_items(items: Sequence[object], model: ItemModel | None = None) -> list[Any]:
    return [convert_item(item, model) for item in items]


__all__ = [
    "JsonObject",
    "ItemModel",
    "convert_item",
    "convert_items",
]
