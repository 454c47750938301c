"""Campaign, variation, variable, metric and group models from the settings file."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

_MISSING = object()


class InvalidModelData(ValueError):
    """Raised when settings data holds a value of the wrong type."""


def _lookup(data: Mapping[str, Any], name: str) -> Any:
    """Exact key first, then a case-insensitive match."""
    if name in data:
        return data[name]
    lower = name.lower()
    for key, value in data.items():
        if isinstance(key, str) and key.lower() == lower:
            return value
    return _MISSING


def _fail(value: Any, kind: str, name: str) -> InvalidModelData:
    return InvalidModelData(f"cannot use {value!r} as {kind} for field {name!r}")


def _to_int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise _fail(value, "int", name)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise _fail(value, "int", name)


def _to_float(value: Any, name: str) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    raise _fail(value, "float", name)


def _to_str(value: Any, name: str) -> str:
    if isinstance(value, str):
        return value
    raise _fail(value, "str", name)


def _to_bool(value: Any, name: str) -> bool:
    if isinstance(value, bool):
        return value
    raise _fail(value, "bool", name)


def _to_any(value: Any, name: str) -> Any:
    return value


def _to_dict(value: Any, name: str) -> dict[str, Any]:
    if isinstance(value, Mapping):
        return dict(value)
    raise _fail(value, "mapping", name)


def _to_float_map(value: Any, name: str) -> dict[str, float]:
    if not isinstance(value, Mapping):
        raise _fail(value, "mapping", name)
    return {_to_str(k, name): _to_float(v, name) for k, v in value.items()}


def _list_of(convert: Callable[[Any, str], Any]) -> Callable[[Any, str], list[Any]]:
    def load(value: Any, name: str) -> list[Any]:
        if not isinstance(value, (list, tuple)):
            raise _fail(value, "list", name)
        return [convert(item, name) for item in value if item is not None]

    return load


def _model(factory: Callable[[], type]) -> Callable[[Any, str], Any]:
    def load(value: Any, name: str) -> Any:
        if not isinstance(value, Mapping):
            raise _fail(value, "mapping", name)
        return factory().from_dict(value)

    return load


@dataclass(frozen=True)
class _Field:
    json: str
    attr: str
    convert: Callable[[Any, str], Any]
    always: bool = False


def _load(cls: type, data: Any, fields: tuple[_Field, ...]) -> Any:
    if not isinstance(data, Mapping):
        raise InvalidModelData(f"expected a mapping for {cls.__name__}, got {data!r}")
    values: dict[str, Any] = {}
    for spec in fields:
        value = _lookup(data, spec.json)
        if value is _MISSING or value is None:
            continue
        values[spec.attr] = spec.convert(value, spec.json)
    return cls(**values)


def _plain(value: Any) -> Any:
    if isinstance(value, list):
        return [_plain(item) for item in value]
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    return value


def _dump(obj: Any, fields: tuple[_Field, ...]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for spec in fields:
        value = getattr(obj, spec.attr)
        if spec.always or value:
            result[spec.json] = _plain(value)
    return result


@dataclass
class Variable:
    """A typed key/value attached to a variation."""

    id: int = 0
    type: str = ""
    key: str = ""
    value: Any = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Variable:
        """Build from a settings mapping."""
        return _load(cls, data, _VARIABLE_FIELDS)

    def to_dict(self) -> dict[str, Any]:
        """Mapping with the settings file's key names."""
        return _dump(self, _VARIABLE_FIELDS)


@dataclass
class Metric:
    """A goal tracked by a feature."""

    id: int = 0
    identifier: str = ""
    type: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Metric:
        """Build from a settings mapping."""
        return _load(cls, data, _METRIC_FIELDS)

    def to_dict(self) -> dict[str, Any]:
        """Mapping with the settings file's key names."""
        return _dump(self, _METRIC_FIELDS)


@dataclass
class Groups:
    """A mutually exclusive group of campaigns."""

    name: str = ""
    campaigns: list[str] = field(default_factory=list)
    et: int = 0
    p: list[str] = field(default_factory=list)
    wt: dict[str, float] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Groups:
        """Build from a settings mapping."""
        return _load(cls, data, _GROUPS_FIELDS)

    def to_dict(self) -> dict[str, Any]:
        """Mapping with the settings file's key names."""
        return _dump(self, _GROUPS_FIELDS)

    def algorithm(self) -> int:
        """Winner selection algorithm; 1 (random) when not set."""
        return self.et or 1


@dataclass
class Variation:
    """One variation of a campaign, possibly holding nested variations."""

    id: int = 0
    key: str = ""
    name: str = ""
    weight: float = 0.0
    rule_key: str = ""
    salt: str = ""
    type: str = ""
    start_range_variation: int = 0
    end_range_variation: int = 0
    variables: list[Variable] = field(default_factory=list)
    variations: list[Variation] = field(default_factory=list)
    segments: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Variation:
        """Build from a settings mapping."""
        return _load(cls, data, _VARIATION_FIELDS)

    def to_dict(self) -> dict[str, Any]:
        """Mapping with the settings file's key names; empty optional fields left out."""
        return _dump(self, _VARIATION_FIELDS)


@dataclass
class Campaign:
    """A rollout, test or personalisation campaign."""

    id: int = 0
    segments: dict[str, Any] = field(default_factory=dict)
    salt: str = ""
    percent_traffic: int = 0
    is_user_list_enabled: bool = False
    key: str = ""
    type: str = ""
    name: str = ""
    is_forced_variation_enabled: bool = False
    variations: list[Variation] = field(default_factory=list)
    metrics: list[Metric] = field(default_factory=list)
    variables: list[Variable] = field(default_factory=list)
    variation_id: int = 0
    campaign_id: int = 0
    rule_key: str = ""
    start_range_variation: int = 0
    end_range_variation: int = 0
    weight: float = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Campaign:
        """Build from a settings mapping."""
        return _load(cls, data, _CAMPAIGN_FIELDS)

    def to_dict(self) -> dict[str, Any]:
        """Mapping with the settings file's key names; empty optional fields left out."""
        return _dump(self, _CAMPAIGN_FIELDS)


_VARIABLE_FIELDS = (
    _Field("id", "id", _to_int, True),
    _Field("type", "type", _to_str, True),
    _Field("key", "key", _to_str, True),
    _Field("value", "value", _to_any, True),
)

_METRIC_FIELDS = (
    _Field("id", "id", _to_int, True),
    _Field("identifier", "identifier", _to_str, True),
    _Field("type", "type", _to_str, True),
)

_GROUPS_FIELDS = (
    _Field("name", "name", _to_str, True),
    _Field("campaigns", "campaigns", _list_of(_to_str)),
    _Field("et", "et", _to_int),
    _Field("p", "p", _list_of(_to_str)),
    _Field("wt", "wt", _to_float_map),
)

_VARIATION_FIELDS = (
    _Field("id", "id", _to_int, True),
    _Field("key", "key", _to_str, True),
    _Field("name", "name", _to_str),
    _Field("weight", "weight", _to_float, True),
    _Field("ruleKey", "rule_key", _to_str),
    _Field("salt", "salt", _to_str),
    _Field("type", "type", _to_str),
    _Field("startRangeVariation", "start_range_variation", _to_int),
    _Field("endRangeVariation", "end_range_variation", _to_int),
    _Field("variables", "variables", _list_of(_model(lambda: Variable))),
    _Field("variations", "variations", _list_of(_model(lambda: Variation))),
    _Field("segments", "segments", _to_dict),
)

_CAMPAIGN_FIELDS = (
    _Field("id", "id", _to_int, True),
    _Field("segments", "segments", _to_dict),
    _Field("salt", "salt", _to_str),
    _Field("percentTraffic", "percent_traffic", _to_int),
    _Field("isUserListEnabled", "is_user_list_enabled", _to_bool),
    _Field("key", "key", _to_str, True),
    _Field("type", "type", _to_str, True),
    _Field("name", "name", _to_str, True),
    _Field("isForcedVariationEnabled", "is_forced_variation_enabled", _to_bool),
    _Field("variations", "variations", _list_of(_model(lambda: Variation))),
    _Field("metrics", "metrics", _list_of(_model(lambda: Metric))),
    _Field("variables", "variables", _list_of(_model(lambda: Variable))),
    _Field("variationId", "variation_id", _to_int),
    _Field("campaignId", "campaign_id", _to_int),
    _Field("ruleKey", "rule_key", _to_str),
    _Field("startRangeVariation", "start_range_variation", _to_int),
    _Field("endRangeVariation", "end_range_variation", _to_int),
    _Field("weight", "weight", _to_float),
)