from datetime import date

import pytest

from school_adviser.utils.date import get_date


@pytest.mark.unit
def test_get_date_parses_ymd():
    assert get_date("20230825") == date(2023, 8, 25)
    assert get_date("19830301") == date(1983, 3, 1)


@pytest.mark.unit
def test_get_date_leap_day():
    assert get_date("20240229") == date(2024, 2, 29)


@pytest.mark.unit
@pytest.mark.parametrize(
    "value",
    ["2023825", "2023-08-25", "202308250", "", "abcdefgh", "20230231", "20231301", " 20230825"],
)
def test_get_date_rejects_malformed(value):
    with pytest.raises(ValueError):
        get_date(value)


@pytest.mark.unit
def test_get_date_rejects_non_string():
    with pytest.raises(ValueError):
        get_date(20230825)
