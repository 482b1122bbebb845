# -*- coding: utf-8 -*-
"""
This module contains the calendar helpers used to place due dates.

Month arithmetic is delegated to dateutil's relativedelta: when the start day
does not exist in the target month the day is clamped to the last day of that
month, so 2018-01-31 plus one month is 2018-02-28. Every due date is computed
from the start time directly, so a clamped February does not shift March.
"""
import datetime as dt
from dateutil.relativedelta import relativedelta
from dateutil.parser import isoparse


def normalize_start_time(value):
    """
    Return ``value`` as a timezone-aware datetime.

    Naive datetimes, dates and Unix timestamps are interpreted as UTC.
    """
    if isinstance(value, dt.datetime):
        moment = value
    elif isinstance(value, dt.date):
        moment = dt.datetime(value.year, value.month, value.day)
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        return dt.datetime.fromtimestamp(value, tz=dt.timezone.utc)
    elif isinstance(value, str):
        moment = isoparse(value)
    else:
        raise TypeError(f"Unsupported start time type: {type(value).__name__}.")

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=dt.timezone.utc)
    return moment


def add_months(start, months):
    return start + relativedelta(months=months)


def to_timestamp(moment):
    return int(moment.timestamp())
