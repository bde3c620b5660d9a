"""
Weekly registration report.

Groups users by the weekday of their registration and projects the
requested days into a mapping keyed by day label.  Days are numbered
0 = Sunday through 6 = Saturday and are taken from the UTC timestamp
stored by SQLite, without conversion to any local timezone.

The report is built from one full scan of the users table, which is
fine at the expected scale but grows linearly with the user count.
"""

import logging
from collections import defaultdict
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from ..core.config import settings
from ..core.errors import ValidationError
from ..schemas.user import UserSummary
from .user_store import UserStore


logger = logging.getLogger(__name__)

DAYS_IN_WEEK = 7


def day_index(moment: datetime) -> int:
    """Weekday of ``moment`` with Sunday as 0."""
    return moment.isoweekday() % DAYS_IN_WEEK


def _validate_days(days: Optional[Sequence[int]]) -> None:
    if not days:
        raise ValidationError.for_field("week_number", "The week number field is required.")
    errors: Dict[str, List[str]] = {}
    for position, day in enumerate(days):
        if isinstance(day, bool) or not isinstance(day, int) or not 0 <= day < DAYS_IN_WEEK:
            errors[f"week_number.{position}"] = ["Day index must be an integer between 0 and 6."]
    if errors:
        raise ValidationError(errors)


class WeeklyReportService:
    """Builds the users-by-weekday report."""

    @classmethod
    async def users_by_days(
        cls,
        days: Sequence[int],
        labels: Optional[Sequence[str]] = None,
    ) -> Dict[str, List[UserSummary]]:
        """Return ``{label: [UserSummary, ...]}`` for each requested day.

        Every requested day appears in the result, mapped to an empty
        list when nobody registered on it.  Keys follow request order;
        users within a day are in registration order.

        Parameters
        ----------
        days : Sequence[int]
            Requested day indices, each in ``[0, 6]``.
        labels : Optional[Sequence[str]]
            Seven day labels indexed by day number.  Defaults to
            ``settings.day_labels``.
        """
        _validate_days(days)
        labels = labels if labels is not None else settings.day_labels

        grouped: Dict[int, List[UserSummary]] = defaultdict(list)
        for user in await UserStore.list_all():
            grouped[day_index(user.created_at)].append(
                UserSummary(name=user.name, email=user.email)
            )

        report: Dict[str, List[UserSummary]] = {}
        for day in days:
            report[labels[day]] = list(grouped.get(day, []))
        logger.info("Weekly report for days %s", list(days))
        return report
