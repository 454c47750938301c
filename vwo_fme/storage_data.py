"""Record of a stored flag decision for one user and feature."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


class InvalidStorageData(ValueError):
    """Raised when stored data has a value of the wrong type."""


_FIELDS: dict[str, tuple[str, type]] = {
    "featureKey": ("feature_key", str),
    "featureId": ("feature_id", int),
    "user": ("user", str),
    "rolloutId": ("rollout_id", int),
    "rolloutKey": ("rollout_key", str),
    "rolloutVariationId": ("rollout_variation_id", int),
    "experimentId": ("experiment_id", int),
    "experimentKey": ("experiment_key", str),
    "experimentVariationId": ("experiment_variation_id", int),
}

_ALWAYS_WRITTEN = ("featureKey", "featureId", "user")


def _coerce(key: str, value: Any, kind: type) -> Any:
    if kind is str:
        if isinstance(value, str):
            return value
    elif isinstance(value, bool):
        pass
    elif isinstance(value, int):
        return value
    elif isinstance(value, float) and value.is_integer():
        return int(value)
    raise InvalidStorageData(
        f"cannot use {value!r} as {kind.__name__} for field {key!r}"
    )


@dataclass
class StorageData:
    """Feature and variation identifiers kept for a user."""

    feature_key: str = ""
    feature_id: int = 0
    user: str = ""
    rollout_id: int = 0
    rollout_key: str = ""
    rollout_variation_id: int = 0
    experiment_id: int = 0
    experiment_key: str = ""
    experiment_variation_id: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StorageData:
        """Build from a mapping; keys match case-insensitively, unknown keys are ignored."""
        by_lower = {name.lower(): name for name in _FIELDS}
        values: dict[str, Any] = {}
        exact: set[str] = set()
        for key, value in data.items():
            name = key if key in _FIELDS else by_lower.get(str(key).lower())
            if name is None:
                continue
            if name in exact and key != name:
                continue
            if key == name:
                exact.add(name)
            if value is None:
                continue
            attr, kind = _FIELDS[name]
            values[attr] = _coerce(name, value, kind)
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Mapping with camelCase keys; optional fields left out when empty."""
        result: dict[str, Any] = {}
        for name, (attr, _) in _FIELDS.items():
            value = getattr(self, attr)
            if name in _ALWAYS_WRITTEN or value:
                result[name] = value
        return result