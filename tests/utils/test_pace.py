import pytest

from runplan.utils.pace import pace_to_seconds, seconds_to_pace


@pytest.mark.parametrize(
    "pace, expected",
    [("6:00", 360), ("5:42", 342), ("10:05", 605), (" 4:59 ", 299)],
)
def test_pace_to_seconds(pace: str, expected: int):
    assert pace_to_seconds(pace) == expected


@pytest.mark.parametrize("pace", [None, "", "0:00", "6:60", "6", "123:00", "6:5", "abc"])
def test_invalid_paces_are_none(pace):
    assert pace_to_seconds(pace) is None


@pytest.mark.parametrize(
    "seconds, expected", [(360, "6:00"), (341.6, "5:42"), (59.4, "0:59"), (0, ""), (-5, "")]
)
def test_seconds_to_pace(seconds: float, expected: str):
    assert seconds_to_pace(seconds) == expected
