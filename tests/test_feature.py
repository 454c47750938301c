import pytest

from vwo_fme.campaign import Campaign, InvalidModelData, Metric
from vwo_fme.feature import Feature, Rule

FEATURE_DATA = {
    "id": 7,
    "key": "checkout",
    "name": "Checkout",
    "type": "FEATURE_FLAG",
    "isEnabled": True,
    "metrics": [{"id": 3, "identifier": "purchase", "type": "CUSTOM_GOAL"}],
    "rules": [
        {
            "type": "FLAG_ROLLOUT",
            "status": True,
            "variationId": 1,
            "campaignId": 11,
            "ruleKey": "rollout1",
        }
    ],
    "impactCampaign": {"campaignId": 99, "type": "IMPACT"},
    "isDebuggerEnabled": True,
}


def test_rule_from_dict_reads_all_fields():
    rule = Rule.from_dict(FEATURE_DATA["rules"][0])
    assert rule == Rule(
        type="FLAG_ROLLOUT",
        status=True,
        variation_id=1,
        campaign_id=11,
        rule_key="rollout1",
    )


def test_rule_to_dict_always_writes_every_key():
    assert Rule().to_dict() == {
        "type": "",
        "status": False,
        "variationId": 0,
        "campaignId": 0,
        "ruleKey": "",
    }


def test_rule_round_trip():
    data = FEATURE_DATA["rules"][0]
    assert Rule.from_dict(data).to_dict() == data


def test_rule_wrong_type_raises():
    with pytest.raises(InvalidModelData):
        Rule.from_dict({"campaignId": "eleven"})


def test_feature_from_dict_builds_nested_models():
    feature = Feature.from_dict(FEATURE_DATA)
    assert feature.id == 7
    assert feature.key == "checkout"
    assert feature.is_enabled is True
    assert feature.metrics == [Metric(id=3, identifier="purchase", type="CUSTOM_GOAL")]
    assert feature.rules[0].campaign_id == 11
    assert isinstance(feature.impact_campaign, Campaign)
    assert feature.impact_campaign.campaign_id == 99
    assert feature.is_debugger_enabled is True
    assert feature.is_gateway_service_required is False


def test_feature_round_trip():
    feature = Feature.from_dict(FEATURE_DATA)
    assert Feature.from_dict(feature.to_dict()) == feature


def test_feature_to_dict_leaves_out_empty_optional_fields():
    assert Feature(id=1, key="k").to_dict() == {
        "id": 1,
        "key": "k",
        "name": "",
        "type": "",
    }


def test_feature_metrics_absent_versus_empty():
    assert Feature.from_dict({"id": 1}).metrics is None
    assert Feature.from_dict({"id": 1, "metrics": []}).metrics == []


def test_feature_missing_impact_campaign_is_none():
    assert Feature.from_dict({"key": "k"}).impact_campaign is None


def test_feature_rejects_non_mapping_rule():
    with pytest.raises(InvalidModelData):
        Feature.from_dict({"rules": ["not a rule"]})


def test_feature_rejects_non_mapping_input():
    with pytest.raises(InvalidModelData):
        Feature.from_dict(["id", 1])