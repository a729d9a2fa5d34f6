"""Approximate calendar arithmetic and formatting constants."""

SECONDS_PER_DAY = 86400

DAYS_PER_YEAR = 365.25
"""Fictional calendars are not modeled precisely; every year is 365.25 days."""

DAYS_PER_MONTH = 30
"""Every month is 30 days. No variable month lengths, no carry."""

SECONDS_PER_YEAR = int(DAYS_PER_YEAR * SECONDS_PER_DAY)
"""31,557,600 seconds. Shared by both conversion directions."""

SECONDS_PER_MONTH = DAYS_PER_MONTH * SECONDS_PER_DAY
"""2,592,000 seconds."""

ISO_DATETIME_FORMAT = "{year}-{month:02d}-{day:02d} {hour:02d}:{minute:02d}:{second:02d}"
"""Rendering of absolute timestamps."""

GENERIC_DATE_FORMAT = "{year}-{month:02d}-{day:02d}"
"""Rendering used when no configured age covers a timestamp."""

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
"""English month names, independent of the process locale."""
