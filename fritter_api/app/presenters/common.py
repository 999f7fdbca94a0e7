"""
Date formatting shared by all presenters.
"""

from datetime import datetime

_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def _ordinal(day: int) -> str:
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def format_date(date: datetime) -> str:
    """Format a timestamp as ``"April 4th 2023, 2:31:09 pm"``.

    Aware timestamps (stored ones are UTC) are shown in the server's
    local time zone; naive ones are taken as already local.  English
    month names and a 12-hour clock are used regardless of the process
    locale.  Sub-second precision is dropped.
    """
    if date.tzinfo is not None:
        date = date.astimezone()
    hour = date.hour % 12 or 12
    meridiem = "am" if date.hour < 12 else "pm"
    return (
        f"{_MONTHS[date.month - 1]} {_ordinal(date.day)} {date.year}, "
        f"{hour}:{date.minute:02d}:{date.second:02d} {meridiem}"
    )
