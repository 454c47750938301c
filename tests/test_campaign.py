import pytest

from vwo_fme.campaign import (
    Campaign,
    Groups,
    InvalidModelData,
    Metric,
    Variable,
    Variation,
)


def _full_campaign() -> dict:
    return {
        "id": 12,
        "segments": {"or": [{"user": "u1"}]},
        "salt": "salty",
        "percentTraffic": 80,
        "isUserListEnabled": True,
        "key": "feature_rollout",
        "type": "FLAG_ROLLOUT",
        "name": "Rollout",
        "isForcedVariationEnabled": True,
        "variations": [
            {
                "id": 1,
                "key": "default",
                "name": "Default",
                "weight": 100.0,
                "variables": [
                    {"id": 3, "type": "string", "key": "color", "value": "red"}
                ],
            }
        ],
        "metrics": [{"id": 4, "identifier": "click", "type": "CUSTOM_GOAL"}],
        "variables": [{"id": 5, "type": "integer", "key": "size", "value": 10}],
        "ruleKey": "rollout",
        "weight": 50.0,
    }


def test_campaign_round_trip():
    data = _full_campaign()
    assert Campaign.from_dict(data).to_dict() == data


def test_campaign_nested_objects_are_models():
    campaign = Campaign.from_dict(_full_campaign())
    assert campaign.variations[0].variables[0].value == "red"
    assert campaign.metrics[0].identifier == "click"
    assert campaign.percent_traffic == 80
    assert campaign.is_forced_variation_enabled is True


def test_campaign_minimal_keeps_required_keys_only():
    data = {"id": 1, "key": "k", "type": "FLAG_TESTING", "name": "n"}
    assert Campaign.from_dict(data).to_dict() == data


def test_default_campaign_writes_required_keys():
    assert set(Campaign().to_dict()) == {"id", "key", "type", "name"}


def test_default_variation_writes_required_keys():
    assert set(Variation().to_dict()) == {"id", "key", "weight"}


def test_variable_always_writes_value_even_when_none():
    assert Variable(id=2, type="json", key="cfg").to_dict()["value"] is None


def test_metric_round_trip():
    data = {"id": 9, "identifier": "purchase", "type": "REVENUE"}
    assert Metric.from_dict(data).to_dict() == data


def test_variation_with_nested_variations_round_trip():
    data = {
        "id": 1,
        "key": "outer",
        "weight": 50.0,
        "startRangeVariation": 1,
        "endRangeVariation": 5000,
        "variations": [{"id": 2, "key": "inner", "weight": 25.0}],
        "segments": {"and": []},
    }
    variation = Variation.from_dict(data)
    assert variation.variations[0].key == "inner"
    assert variation.to_dict() == data


def test_keys_match_case_insensitively():
    campaign = Campaign.from_dict({"ID": 7, "PercentTraffic": 30})
    assert campaign.id == 7
    assert campaign.percent_traffic == 30


def test_null_values_leave_defaults():
    campaign = Campaign.from_dict({"id": None, "variations": None, "name": None})
    assert campaign == Campaign()


def test_integral_float_accepted_for_int():
    assert Campaign.from_dict({"id": 3.0}).id == 3


def test_int_weight_becomes_float():
    variation = Variation.from_dict({"weight": 40})
    assert variation.weight == 40
    assert isinstance(variation.weight, float)


@pytest.mark.parametrize(
    "cls, data",
    [
        (Campaign, {"id": "x"}),
        (Campaign, {"id": True}),
        (Campaign, {"id": 1.5}),
        (Campaign, {"variations": "none"}),
        (Campaign, {"isUserListEnabled": 1}),
        (Variation, {"weight": "heavy"}),
        (Metric, {"identifier": 5}),
        (Groups, {"wt": {"a": "b"}}),
    ],
)
def test_wrong_types_raise(cls, data):
    with pytest.raises(InvalidModelData):
        cls.from_dict(data)


def test_non_mapping_raises():
    with pytest.raises(InvalidModelData):
        Campaign.from_dict(["id", 1])


def test_invalid_model_data_is_value_error():
    with pytest.raises(ValueError):
        Variable.from_dict({"id": "one"})


def test_groups_algorithm_defaults_to_random():
    assert Groups(name="g").algorithm() == 1


def test_groups_algorithm_uses_et_when_set():
    assert Groups.from_dict({"name": "g", "et": 2}).algorithm() == 2


def test_groups_round_trip():
    data = {
        "name": "group",
        "campaigns": ["1", "2"],
        "et": 2,
        "p": ["2", "1"],
        "wt": {"1": 30.0, "2": 70.0},
    }
    assert Groups.from_dict(data).to_dict() == data


def test_groups_empty_optional_fields_left_out():
    assert Groups.from_dict({"name": "group"}).to_dict() == {"name": "group"}