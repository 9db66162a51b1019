import pytest

from rasterposter.maintenance import CommandType, Locale, Status


def test_command_type_lookup_by_value():
    assert CommandType(2) is CommandType.HEADCLEANING
    assert CommandType(0) is CommandType.UNKNOWN


def test_command_type_rejects_unknown_value():
    with pytest.raises(ValueError):
        CommandType(4)


def test_status_order_follows_definition():
    names = [
        "UNKNOWN",
        "PROCESSING",
        "COMPLETED",
        "CANCELED",
        "ERROR",
        "NEED_NOZZLECHECK",
        "NEED_HEADCLEANING",
    ]
    assert [Status(value).name for value in range(len(names))] == names
    with pytest.raises(ValueError):
        Status(len(names))


def test_locale_values_are_consecutive():
    assert [int(loc) for loc in Locale] == list(range(len(Locale)))
    assert Locale(11) is Locale.ZH_TW


def test_locale_from_code_case_insensitive():
    assert Locale.from_code("ja") is Locale.JA
    assert Locale.from_code(" De ") is Locale.DE


def test_locale_from_code_accepts_dash():
    assert Locale.from_code("zh-tw") is Locale.ZH_TW
    assert Locale.from_code("zh_TW") is Locale.ZH_TW


def test_locale_from_code_round_trips_names():
    for loc in Locale:
        assert Locale.from_code(loc.name.lower()) is loc


def test_locale_from_code_rejects_unknown():
    with pytest.raises(ValueError):
        Locale.from_code("xx")