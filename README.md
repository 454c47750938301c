# vwo_fme

Typed building blocks for a feature-management and experimentation
client: models for account settings, features, campaigns and
variations, structural validation of settings, the record of a stored
flag decision, the result of a flag evaluation, query parameters for
settings and event requests, and the payload sent with events.

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it holds |
| --- | --- |
| `vwo_fme.constants` | SDK name and version, traffic limits, endpoints, default intervals, non-retryable event names |
| `vwo_fme.campaign` | `Campaign`, `Variation`, `Variable`, `Metric`, `Groups`, and the `InvalidModelData` error |
| `vwo_fme.feature` | `Feature`, `Rule` |
| `vwo_fme.settings` | `Settings` |
| `vwo_fme.settings_schema` | `SettingsSchema`, which validates a `Settings` object |
| `vwo_fme.storage_data` | `StorageData` for a stored decision, and the `InvalidStorageData` error |
| `vwo_fme.flag` | `GetFlag`, `FlagVariable` |
| `vwo_fme.request_params` | `SettingsQueryParams`, `RequestQueryParams` |
| `vwo_fme.event_payload` | `EventArchPayload`, `EventArchData`, `Event`, `Visitor`, `Props` |

## Settings

`Settings.from_json` parses a JSON document, and `Settings.from_dict`
takes a mapping. Keys are the camelCase names of the settings file and
are matched case-insensitively. A value of the wrong type raises
`InvalidModelData`. `to_dict` writes the mapping back and leaves empty
optional fields out.

```python
from vwo_fme.settings import Settings
from vwo_fme.settings_schema import SettingsSchema

settings = Settings.from_json("""
{
  "sdkKey": "placeholder",
  "accountId": 123456,
  "version": 1,
  "campaigns": [],
  "features": [
    {"id": 1, "key": "checkout", "name": "Checkout", "type": "FEATURE_FLAG",
     "metrics": [{"id": 1, "identifier": "purchase", "type": "CUSTOM_GOAL"}]}
  ]
}
""")

schema = SettingsSchema()
schema.is_settings_valid(settings)                         # True
schema.validate_settings(settings).errors_as_string()      # ""
```

`validate_settings` returns a new `SettingsSchema` whose `valid` and
`errors` describe the settings given. It reports a missing version or
account id, a missing campaigns list, and, for each campaign, feature,
variation, variable, metric and rule, the required fields that are
empty, with messages such as `Campaign[0].Variation[1]: Variation weight is empty`.

`Settings.effective_poll_interval()` returns `pollInterval`, or the
default of 600000 milliseconds when it is not set. `Groups.algorithm()`
returns the group's `et`, or 1 when it is not set.

## Stored decisions

```python
from vwo_fme.storage_data import StorageData

stored = StorageData.from_dict(
    {"featureKey": "checkout", "featureId": 1, "user": "user-1",
     "rolloutKey": "checkout_rollout", "rolloutId": 5, "rolloutVariationId": 1}
)
stored.to_dict()   # featureKey, featureId and user always; other fields only when set
```

Whole-number floats are accepted for integer fields; other wrongly
typed values raise `InvalidStorageData`.

## Flag results

```python
from vwo_fme.flag import FlagVariable, GetFlag

flag = GetFlag(enabled=True, variables=[FlagVariable(key="color", value="red", type="string", id=1)])
flag.is_enabled()                     # True
flag.get_variable("color", "blue")    # "red"
flag.get_variable("size", 10)         # 10
flag.get_variables()                  # [{"key": "color", "value": "red", "type": "string", "id": 1}]
```

## Requests and event payloads

```python
from vwo_fme.request_params import RequestQueryParams, SettingsQueryParams

SettingsQueryParams(api_key="placeholder", random="0.5", account_id="123456").as_dict()
# {"i": "placeholder", "r": "0.5", "a": "123456"}

params = RequestQueryParams.create("vwo_variationShown", "123456", "placeholder", "", "")
params.as_dict()   # en, a, env, eTime, random, p, sn, sv; visitor_ua and visitor_ip only when set
```

`RequestQueryParams.create` stamps the current time in milliseconds and
a fresh random value.

```python
from vwo_fme.event_payload import Event, EventArchData, EventArchPayload, Props, Visitor

props = Props(sdk_name="vwo-fme-go-sdk", sdk_version="1.3.0", env_key="placeholder",
              additional_properties={"plan": "pro"})
payload = EventArchPayload(d=EventArchData(
    msg_id="msg-1", vis_id="user-1", session_id=1700000000,
    event=Event(props=props, name="purchase", time=1700000000000),
    visitor=Visitor(props={"vwo_fs_environment": "placeholder"}),
))
payload.to_json()
```

`Props.to_dict` leaves empty known fields out and places extra
properties beside them; `Props.from_dict` puts unknown keys into
`additional_properties`.

## What the package does not do

It holds data, validation and serialisation only. It does not fetch
settings over the network, decide which variation a user gets, send
events or impressions, retry or batch requests, or keep stored
decisions anywhere; a client built on it supplies those parts.