"""Payload of the event architecture endpoints."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _as_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _as_int(value: Any) -> int | None:
    return int(value) if _is_number(value) else None


def _as_bool(value: Any) -> bool | None:
    return value if isinstance(value, bool) else None


def _as_dict(value: Any) -> dict[str, Any] | None:
    return dict(value) if isinstance(value, Mapping) else None


_PROP_FIELDS: dict[str, tuple[str, Callable[[Any], Any]]] = {
    "vwo_sdkName": ("sdk_name", _as_str),
    "vwo_sdkVersion": ("sdk_version", _as_str),
    "vwo_envKey": ("env_key", _as_str),
    "variation": ("variation", _as_str),
    "id": ("id", _as_int),
    "isFirst": ("is_first", _as_int),
    "isCustomEvent": ("is_custom_event", _as_bool),
    "vwoMeta": ("vwo_meta", _as_dict),
    "product": ("product", _as_str),
    "data": ("data", _as_dict),
}


@dataclass
class Props:
    """Event properties; extra properties sit beside the known ones on the wire."""

    sdk_name: str = ""
    sdk_version: str = ""
    env_key: str = ""
    variation: str = ""
    id: int = 0
    is_first: int = 0
    is_custom_event: bool = False
    vwo_meta: dict[str, Any] = field(default_factory=dict)
    product: str = ""
    data: dict[str, Any] = field(default_factory=dict)
    additional_properties: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Flat mapping; empty known fields left out, extra properties merged in."""
        result: dict[str, Any] = {}
        for key, (attr, _) in _PROP_FIELDS.items():
            value = getattr(self, attr)
            if value:
                result[key] = value
        result.update(self.additional_properties)
        return dict(sorted(result.items()))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Props:
        """Build from a flat mapping; unknown keys become extra properties.

        Known keys holding a value of the wrong type are ignored; numbers are
        truncated to integers.
        """
        props = cls()
        for key, value in data.items():
            known = _PROP_FIELDS.get(key)
            if known is None:
                props.additional_properties[key] = value
                continue
            attr, convert = known
            converted = convert(value)
            if converted is not None:
                setattr(props, attr, converted)
        return props


@dataclass
class Event:
    """A named event with its properties and time in milliseconds."""

    props: Props | None = None
    name: str = ""
    time: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Mapping with ``props``, ``name`` and ``time``."""
        return {
            "props": self.props.to_dict() if self.props is not None else None,
            "name": self.name,
            "time": self.time,
        }


@dataclass
class Visitor:
    """Visitor properties sent with an event."""

    props: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Mapping with ``props``."""
        return {"props": dict(self.props)}


@dataclass
class EventArchData:
    """Body of an event payload."""

    msg_id: str = ""
    vis_id: str = ""
    session_id: int = 0
    event: Event | None = None
    visitor: Visitor | None = None
    visitor_ua: str = ""
    visitor_ip: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Mapping under wire names; visitor user agent and IP only when set."""
        result: dict[str, Any] = {
            "msgId": self.msg_id,
            "visId": self.vis_id,
            "sessionId": self.session_id,
            "event": self.event.to_dict() if self.event is not None else None,
            "visitor": self.visitor.to_dict() if self.visitor is not None else None,
        }
        if self.visitor_ua:
            result["visitor_ua"] = self.visitor_ua
        if self.visitor_ip:
            result["visitor_ip"] = self.visitor_ip
        return result


@dataclass
class EventArchPayload:
    """Top-level event payload wrapping its data under ``d``."""

    d: EventArchData | None = None

    def to_dict(self) -> dict[str, Any]:
        """Mapping with ``d``."""
        return {"d": self.d.to_dict() if self.d is not None else None}

    def to_json(self) -> str:
        """Compact JSON text of the payload."""
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)