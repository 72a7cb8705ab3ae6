# SPDX-License-Identifier: MIT

import pendulum


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    parsed = pendulum.parse(datetime)
    if not isinstance(parsed, pendulum.DateTime):
        raise ValueError(f"not a date and time: {datetime!r}")
    return parsed


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("MMM-DD ddd HH:mm")


def datetime_to_file_suffix_str(datetime: pendulum.DateTime) -> str:
    """Compact local timestamp used in backup file names."""
    return datetime.in_tz("local").format("YYYYMMDD-HHmmss")
