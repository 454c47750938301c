"""Structural validation of account settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from vwo_fme.campaign import Campaign, Metric, Variable, Variation
from vwo_fme.feature import Feature, Rule
from vwo_fme.settings import Settings


@dataclass
class SettingsSchema:
    """Outcome of a settings validation: whether valid, and the errors found."""

    valid: bool = True
    errors: list[str] = field(default_factory=list)

    def add_error(self, error: str) -> None:
        """Record an error and mark the result invalid."""
        self.errors.append(error)
        self.valid = False

    def errors_as_string(self) -> str:
        """All errors joined with ``"; "``."""
        return "; ".join(self.errors)

    def is_settings_valid(self, settings: Settings | None) -> bool:
        """Whether ``settings`` passes validation."""
        return self.validate_settings(settings).valid

    def validate_settings(self, settings: Settings | None) -> SettingsSchema:
        """Check required fields of settings, campaigns, features and their parts."""
        result = SettingsSchema()
        try:
            if settings is None:
                result.add_error("Settings object is null")
                return result

            if not settings.version:
                result.add_error("Settings version is null")
            if not settings.account_id:
                result.add_error("Settings accountId is null")

            if settings.campaigns is None:
                result.add_error("Settings campaigns list is null")
            else:
                for index, camp in enumerate(settings.campaigns):
                    result._merge(self._validate_campaign(camp, index))

            for index, feat in enumerate(settings.features or ()):
                result._merge(self._validate_feature(feat, index))
        except (AttributeError, TypeError) as exc:
            result.add_error(f"Error validating settings: {exc}")
        return result

    def _merge(self, other: SettingsSchema) -> None:
        if not other.valid:
            self.errors.extend(other.errors)
            self.valid = False

    def _validate_campaign(self, camp: Campaign | None, index: int) -> SettingsSchema:
        result = SettingsSchema()
        prefix = f"Campaign[{index}]: "
        if camp is None:
            result.add_error(prefix + "Campaign object is null")
            return result
        if not camp.id:
            result.add_error(prefix + "Campaign id is null")
        if not camp.type:
            result.add_error(prefix + "Campaign type is null")
        if not camp.key:
            result.add_error(prefix + "Campaign key is null")
        if not camp.name:
            result.add_error(prefix + "Campaign name is null")
        if camp.variations is None:
            result.add_error(prefix + "Campaign variations list is null")
        elif not camp.variations:
            result.add_error(prefix + "Campaign variations list is empty")
        else:
            for position, variation in enumerate(camp.variations):
                result._merge(self._validate_variation(variation, index, position))
        return result

    def _validate_variation(
        self, variation: Variation | None, campaign_index: int, variation_index: int
    ) -> SettingsSchema:
        result = SettingsSchema()
        location = f"Campaign[{campaign_index}].Variation[{variation_index}]"
        prefix = location + ": "
        if variation is None:
            result.add_error(prefix + "Variation object is null")
            return result
        if not variation.id:
            result.add_error(prefix + "Variation id is null")
        if not variation.name:
            result.add_error(prefix + "Variation name is null")
        if not variation.weight:
            result.add_error(prefix + "Variation weight is empty")
        for position, variable in enumerate(variation.variables or ()):
            result._merge(self._validate_variable(variable, f"{location}.Variable[{position}]"))
        return result

    def _validate_variable(self, variable: Variable | None, context: str) -> SettingsSchema:
        result = SettingsSchema()
        prefix = context + ": "
        if variable is None:
            result.add_error(prefix + "Variable object is null")
            return result
        if not variable.id:
            result.add_error(prefix + "Variable id is null")
        if not variable.type:
            result.add_error(prefix + "Variable type is null")
        if not variable.key:
            result.add_error(prefix + "Variable key is null")
        if variable.value is None:
            result.add_error(prefix + "Variable value is null")
        return result

    def _validate_feature(self, feature: Feature | None, index: int) -> SettingsSchema:
        result = SettingsSchema()
        prefix = f"Feature[{index}]: "
        if feature is None:
            result.add_error(prefix + "Feature object is null")
            return result
        if not feature.id:
            result.add_error(prefix + "Feature id is null")
        if not feature.key:
            result.add_error(prefix + "Feature key is null")
        if not feature.name:
            result.add_error(prefix + "Feature name is null")
        if not feature.type:
            result.add_error(prefix + "Feature type is null")
        if feature.metrics is None:
            result.add_error(prefix + "Feature metrics list is null")
        elif not feature.metrics:
            result.add_error(prefix + "Feature metrics list is empty")
        else:
            for position, metric in enumerate(feature.metrics):
                result._merge(self._validate_metric(metric, index, position))
        for position, rule in enumerate(feature.rules or ()):
            result._merge(self._validate_rule(rule, index, position))
        return result

    def _validate_metric(
        self, metric: Metric | None, feature_index: int, metric_index: int
    ) -> SettingsSchema:
        result = SettingsSchema()
        prefix = f"Feature[{feature_index}].Metric[{metric_index}]: "
        if metric is None:
            result.add_error(prefix + "Metric object is null")
            return result
        if not metric.id:
            result.add_error(prefix + "Metric id is null")
        if not metric.type:
            result.add_error(prefix + "Metric type is null")
        if not metric.identifier:
            result.add_error(prefix + "Metric identifier is null")
        return result

    def _validate_rule(self, rule: Rule | Any, feature_index: int, rule_index: int) -> SettingsSchema:
        result = SettingsSchema()
        prefix = f"Feature[{feature_index}].Rule[{rule_index}]: "
        if rule is None:
            result.add_error(prefix + "Rule object is null")
            return result
        if not rule.type:
            result.add_error(prefix + "Rule type is null")
        if not rule.rule_key:
            result.add_error(prefix + "Rule ruleKey is null")
        if not rule.campaign_id:
            result.add_error(prefix + "Rule campaignId is null")
        return result