from datetime import datetime, timedelta, timezone

from ypts import timeutil


def test_utc_p0800_shifts_from_utc():
    moment = datetime(2024, 1, 1, 0, 0, 0, tzinfo=timezone.utc)
    assert timeutil.utc_p0800(moment) == "2024-01-01T08:00:00+0800"


def test_utc_p0800_same_instant_from_other_zone():
    utc_moment = datetime(2023, 6, 30, 20, 15, 5, tzinfo=timezone.utc)
    other = utc_moment.astimezone(timezone(timedelta(hours=-5)))
    assert timeutil.utc_p0800(other) == timeutil.utc_p0800(utc_moment)


def test_utc_p0800_default_uses_current_time():
    before = timeutil.utc_p0800(datetime.now(timezone.utc))
    result = timeutil.utc_p0800()
    after = timeutil.utc_p0800(datetime.now(timezone.utc))
    assert before <= result <= after
    assert result.endswith("+0800")


def test_date_is_not_zero_padded():
    assert timeutil.date(datetime(2024, 3, 5, 10, 0)) == "2024-3-5"


def test_date_default_uses_current_time():
    before = timeutil.date(datetime.now())
    result = timeutil.date()
    after = timeutil.date(datetime.now())
    assert result in {before, after}