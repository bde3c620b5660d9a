"""
Pydantic models for the weekly registration report.

Day indices follow the 0 = Sunday convention, matching SQLite's
``strftime('%w')`` and the labels in ``Settings.day_labels``.
"""

from typing import List

from pydantic import BaseModel, Field, conint


# Strict so that JSON booleans are not read as 0 or 1.
DayIndex = conint(strict=True, ge=0, le=6)


class WeeklyReportQuery(BaseModel):
    """Requested days of the week, e.g. ``{"week_number": [0, 3]}``."""

    week_number: List[DayIndex] = Field(..., min_length=1, examples=[[1, 5]])
