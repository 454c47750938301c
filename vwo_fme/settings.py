"""Account settings holding all features, campaigns and groups."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from vwo_fme.campaign import (
    Campaign,
    Groups,
    InvalidModelData,
    _dump,
    _fail,
    _Field,
    _list_of,
    _load,
    _model,
    _to_dict,
    _to_int,
    _to_str,
)
from vwo_fme.constants import DEFAULT_POLL_INTERVAL
from vwo_fme.feature import Feature


def _to_int_map(value: Any, name: str) -> dict[str, int]:
    if not isinstance(value, Mapping):
        raise _fail(value, "mapping", name)
    return {_to_str(k, name): _to_int(v, name) for k, v in value.items()}


def _to_groups_map(value: Any, name: str) -> dict[str, Groups]:
    if not isinstance(value, Mapping):
        raise _fail(value, "mapping", name)
    return {_to_str(k, name): Groups.from_dict(v) for k, v in value.items()}


@dataclass
class Settings:
    """Settings of one account.

    ``campaigns`` is ``None`` when the settings give no campaigns list at all.
    """

    sdk_key: str = ""
    account_id: int = 0
    version: int = 0
    collection_prefix: str = ""
    usage_stats_account_id: int = 0
    features: list[Feature] = field(default_factory=list)
    campaigns: list[Campaign] | None = None
    campaign_groups: dict[str, int] = field(default_factory=dict)
    groups: dict[str, Groups] = field(default_factory=dict)
    poll_interval: int = 0
    sdk_meta_info: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Settings:
        """Build from a settings mapping."""
        return _load(cls, data, _SETTINGS_FIELDS)

    @classmethod
    def from_json(cls, text: str | bytes) -> Settings:
        """Parse a JSON settings document."""
        data = json.loads(text)
        if not isinstance(data, dict):
            raise InvalidModelData(f"settings must be a JSON object, got {data!r}")
        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        """Mapping with the settings file's key names; empty optional fields left out."""
        return _dump(self, _SETTINGS_FIELDS)

    def effective_poll_interval(self) -> int:
        """Poll interval in milliseconds, falling back to the default when unset."""
        return self.poll_interval or DEFAULT_POLL_INTERVAL


_SETTINGS_FIELDS = (
    _Field("sdkKey", "sdk_key", _to_str, True),
    _Field("accountId", "account_id", _to_int, True),
    _Field("version", "version", _to_int, True),
    _Field("collectionPrefix", "collection_prefix", _to_str),
    _Field("usageStatsAccountId", "usage_stats_account_id", _to_int),
    _Field("features", "features", _list_of(_model(lambda: Feature))),
    _Field("campaigns", "campaigns", _list_of(_model(lambda: Campaign))),
    _Field("campaignGroups", "campaign_groups", _to_int_map),
    _Field("groups", "groups", _to_groups_map),
    _Field("pollInterval", "poll_interval", _to_int),
    _Field("sdkMetaInfo", "sdk_meta_info", _to_dict),
)