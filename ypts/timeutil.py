"""Timestamps in China Standard Time (UTC+08:00) and local dates."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

SHANGHAI = timezone(timedelta(hours=8), "Asia/Shanghai")


def utc_p0800(now: datetime | None = None) -> str:
    """ISO-like timestamp at UTC+08:00, e.g. ``YYYY-MM-DDTHH:MM:SS+0800``."""
    moment = now if now is not None else datetime.now(timezone.utc)
    return moment.astimezone(SHANGHAI).strftime("%Y-%m-%dT%H:%M:%S%z")


def date(now: datetime | None = None) -> str:
    """Local date as ``Y-M-D`` without zero padding."""
    moment = now if now is not None else datetime.now()
    return f"{moment.year}-{moment.month}-{moment.day}"