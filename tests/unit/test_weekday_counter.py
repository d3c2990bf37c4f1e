from datetime import date, timedelta
from unittest.mock import patch

import pytest

from kyc_utils import count_sundays, count_weekday
from kyc_utils.dates.exceptions import InvalidDateError, NegativeTimePeriodError
from kyc_utils.dates.models import Weekday


def _brute_force(start: date, end: date, weekday: Weekday) -> int:
    days = (end - start).days
    return sum((start + timedelta(days=d)).weekday() == weekday for d in range(days + 1))


class TestCountSundays:
    def test_nominal(self) -> None:
        assert count_sundays("01-05-2021", "30-05-2021") == 5
        assert count_sundays("01-05-2021", "01-05-2021") == 0
        assert count_sundays("02-05-2021", "02-05-2021") == 1
        assert count_sundays("01-01-2022", "10-06-2022") == 23

    def test_long_period_with_leap_year(self) -> None:
        assert count_sundays("01-01-2023", "31-12-2025") == 157

    def test_multi_decade_period(self) -> None:
        assert count_sundays("01-01-1970", "01-01-2100") == 6783

    def test_invalid_date_string(self) -> None:
        with pytest.raises(InvalidDateError):
            count_sundays("Invalid date string", "30-05-2021")

    def test_wrong_field_order(self) -> None:
        with pytest.raises(InvalidDateError):
            count_sundays("2021-05-01", "30-05-2021")

    def test_reversed_range(self) -> None:
        with pytest.raises(NegativeTimePeriodError):
            count_sundays("30-05-2021", "01-05-2021")


class TestCountWeekday:
    def test_sunday_in_may_2021(self) -> None:
        assert count_weekday("01-05-2021", "30-05-2021", Weekday.SUNDAY) == 5

    def test_saturdays_in_may_2021(self) -> None:
        assert count_weekday("01-05-2021", "31-05-2021", Weekday.SATURDAY) == 5

    def test_mondays_in_may_2021(self) -> None:
        assert count_weekday("01-05-2021", "31-05-2021", Weekday.MONDAY) == 5

    def test_single_day_range(self) -> None:
        # 01-05-2021 was a Saturday
        for weekday in Weekday:
            expected = 1 if weekday is Weekday.SATURDAY else 0
            assert count_weekday("01-05-2021", "01-05-2021", weekday) == expected

    def test_accepts_weekday_name(self) -> None:
        assert count_weekday("01-05-2021", "30-05-2021", "Sunday") == 5

    def test_unknown_weekday_name(self) -> None:
        with pytest.raises(ValueError, match="Unknown weekday"):
            count_weekday("01-05-2021", "30-05-2021", "Funday")

    def test_leap_day_is_counted(self) -> None:
        # 29-02-2024 was a Thursday
        assert count_weekday("29-02-2024", "29-02-2024", Weekday.THURSDAY) == 1
        assert count_weekday("28-02-2024", "01-03-2024", Weekday.THURSDAY) == 1

    def test_crosses_year_boundary(self) -> None:
        # 31-12-2022 Saturday, 01-01-2023 Sunday
        assert count_weekday("31-12-2022", "01-01-2023", Weekday.SUNDAY) == 1
        assert count_weekday("31-12-2022", "01-01-2023", Weekday.SATURDAY) == 1

    def test_crosses_dst_change(self) -> None:
        # European DST starts 28-03-2021 (Sunday)
        assert count_weekday("27-03-2021", "29-03-2021", Weekday.SUNDAY) == 1

    @pytest.mark.parametrize(
        ("date_from", "date_to"),
        [
            ("01-01-2000", "31-12-2000"),
            ("15-02-1900", "15-03-1900"),
            ("28-02-2100", "07-03-2100"),
            ("03-01-2021", "09-01-2021"),
        ],
    )
    def test_matches_brute_force(self, date_from: str, date_to: str) -> None:
        start = date(int(date_from[6:]), int(date_from[3:5]), int(date_from[:2]))
        end = date(int(date_to[6:]), int(date_to[3:5]), int(date_to[:2]))
        for weekday in Weekday:
            assert count_weekday(date_from, date_to, weekday) == _brute_force(
                start, end, weekday
            )

    def test_full_week_has_one_of_each(self) -> None:
        for weekday in Weekday:
            assert count_weekday("03-05-2021", "09-05-2021", weekday) == 1


class TestCountWeekdayErrors:
    def test_invalid_from_is_reported(self) -> None:
        with pytest.raises(InvalidDateError) as exc_info:
            count_weekday("31-04-2021", "30-05-2021", Weekday.SUNDAY)
        assert exc_info.value.label == "date_from"

    def test_invalid_to_is_reported(self) -> None:
        with pytest.raises(InvalidDateError) as exc_info:
            count_weekday("01-05-2021", "30/05/2021", Weekday.SUNDAY)
        assert exc_info.value.label == "date_to"

    def test_parse_failure_wins_over_reversed_range(self) -> None:
        with pytest.raises(InvalidDateError):
            count_weekday("30-05-2021", "01-05-21", Weekday.SUNDAY)

    def test_negative_period_carries_inputs(self) -> None:
        with pytest.raises(NegativeTimePeriodError) as exc_info:
            count_weekday("02-05-2021", "01-05-2021", Weekday.SUNDAY)
        assert exc_info.value.date_from == "02-05-2021"
        assert exc_info.value.date_to == "01-05-2021"
        assert "Negative time period" in str(exc_info.value)

    def test_logs_warning_on_reversed_range(self) -> None:
        with patch("kyc_utils.dates.counter.Log") as mock_log:
            with pytest.raises(NegativeTimePeriodError):
                count_weekday("02-05-2021", "01-05-2021", Weekday.SUNDAY)
        mock_log.warning.assert_called_once()


class TestWeekday:
    def test_matches_date_weekday_numbering(self) -> None:
        assert date(2021, 5, 3).weekday() == Weekday.MONDAY
        assert date(2021, 5, 9).weekday() == Weekday.SUNDAY

    def test_from_name_ignores_case_and_whitespace(self) -> None:
        assert Weekday.from_name(" tuesday ") is Weekday.TUESDAY
        assert Weekday.from_name("FRIDAY") is Weekday.FRIDAY
