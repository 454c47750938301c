"""Feature and rule models from the settings file."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from vwo_fme.campaign import (
    Campaign,
    Metric,
    Variable,
    _dump,
    _Field,
    _list_of,
    _load,
    _model,
    _to_bool,
    _to_int,
    _to_str,
)


@dataclass
class Rule:
    """Link from a feature to one of its campaigns."""

    type: str = ""
    status: bool = False
    variation_id: int = 0
    campaign_id: int = 0
    rule_key: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Rule:
        """Build from a settings mapping."""
        return _load(cls, data, _RULE_FIELDS)

    def to_dict(self) -> dict[str, Any]:
        """Mapping with the settings file's key names."""
        return _dump(self, _RULE_FIELDS)


@dataclass
class Feature:
    """A feature flag with its rules, metrics and linked campaigns.

    ``metrics`` is ``None`` when the settings do not give a metrics list at all,
    and an empty list when they give an empty one.
    """

    id: int = 0
    key: str = ""
    name: str = ""
    type: str = ""
    is_enabled: bool = False
    variables: list[Variable] = field(default_factory=list)
    metrics: list[Metric] | None = None
    rules: list[Rule] = field(default_factory=list)
    impact_campaign: Campaign | None = None
    rules_linked_campaign: list[Campaign] = field(default_factory=list)
    is_gateway_service_required: bool = False
    is_debugger_enabled: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Feature:
        """Build from a settings mapping."""
        return _load(cls, data, _FEATURE_FIELDS)

    def to_dict(self) -> dict[str, Any]:
        """Mapping with the settings file's key names; empty optional fields left out."""
        return _dump(self, _FEATURE_FIELDS)


_RULE_FIELDS = (
    _Field("type", "type", _to_str, True),
    _Field("status", "status", _to_bool, True),
    _Field("variationId", "variation_id", _to_int, True),
    _Field("campaignId", "campaign_id", _to_int, True),
    _Field("ruleKey", "rule_key", _to_str, True),
)

_FEATURE_FIELDS = (
    _Field("id", "id", _to_int, True),
    _Field("key", "key", _to_str, True),
    _Field("name", "name", _to_str, True),
    _Field("type", "type", _to_str, True),
    _Field("isEnabled", "is_enabled", _to_bool),
    _Field("variables", "variables", _list_of(_model(lambda: Variable))),
    _Field("metrics", "metrics", _list_of(_model(lambda: Metric))),
    _Field("rules", "rules", _list_of(_model(lambda: Rule))),
    _Field("impactCampaign", "impact_campaign", _model(lambda: Campaign)),
    _Field(
        "rulesLinkedCampaign",
        "rules_linked_campaign",
        _list_of(_model(lambda: Campaign)),
    ),
    _Field("isGatewayServiceRequired", "is_gateway_service_required", _to_bool),
    _Field("isDebuggerEnabled", "is_debugger_enabled", _to_bool),
)