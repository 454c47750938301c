from vwo_fme.flag import FlagVariable, GetFlag


def _flag():
    return GetFlag(
        enabled=True,
        variables=[
            FlagVariable(key="color", value="red", type="string", id=1),
            FlagVariable(key="size", value=3, type="integer", id=2),
        ],
    )


def test_new_flag_is_disabled_and_empty():
    flag = GetFlag()
    assert flag.is_enabled() is False
    assert flag.get_variables() == []


def test_is_enabled_reflects_state():
    assert _flag().is_enabled() is True


def test_get_variable_returns_value():
    flag = _flag()
    assert flag.get_variable("color", "blue") == "red"
    assert flag.get_variable("size", 0) == 3


def test_get_variable_falls_back_to_default():
    assert _flag().get_variable("missing", "fallback") == "fallback"
    assert _flag().get_variable("missing") is None


def test_get_variable_first_match_wins():
    flag = GetFlag(
        variables=[
            FlagVariable(key="k", value="first"),
            FlagVariable(key="k", value="second"),
        ]
    )
    assert flag.get_variable("k", None) == "first"


def test_get_variables_returns_maps_in_order():
    assert _flag().get_variables() == [
        {"key": "color", "value": "red", "type": "string", "id": 1},
        {"key": "size", "value": 3, "type": "integer", "id": 2},
    ]


def test_flag_variable_to_dict_has_all_keys():
    assert FlagVariable().to_dict() == {"key": "", "value": None, "type": "", "id": 0}


def test_get_variables_returns_fresh_maps():
    flag = _flag()
    first = flag.get_variables()
    first[0]["value"] = "changed"
    assert flag.get_variable("color") == "red"