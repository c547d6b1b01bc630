"""Recurrence expansion domain service."""

from datetime import date, timedelta
from typing import Optional

from dateutil.relativedelta import relativedelta

from flowcast.domain.entities import Frequency, RecurrenceRule
from flowcast.logger import get_logger
from flowcast.utils.date_parser import as_day

logger = get_logger(__name__)

# Hard cap on occurrences produced per rule and per expansion.
MAX_OCCURRENCES = 50


class RecurrenceExpander:
    """Service for turning recurrence rules into dated occurrences."""

    def next_occurrence(self, rule: RecurrenceRule, today: date) -> Optional[date]:
        """Get the first occurrence of a rule on or after ``today``.

        Args:
            rule: Recurrence rule
            today: Reference date

        Returns:
            Occurrence date, or None if the rule has no occurrence left
        """
        today = as_day(today)
        if rule.specific_date is not None:
            occurrence = rule.specific_date if rule.specific_date >= today else None
        else:
            occurrence = rule.start_date
            while occurrence < today:
                following = self.step(rule, occurrence)
                if following <= occurrence:
                    # One-time rules (or anything without a step) never catch up.
                    return None
                occurrence = following

        if occurrence is not None and rule.end_date is not None and occurrence > rule.end_date:
            return None
        return occurrence

    def expand(self, rule: RecurrenceRule, window_end: date, today: date) -> list[date]:
        """Expand a rule into its occurrences between ``today`` and ``window_end``.

        Args:
            rule: Recurrence rule
            window_end: Last date (inclusive) of the window
            today: First date of the window

        Returns:
            Ordered list of occurrence dates, at most MAX_OCCURRENCES long
        """
        today = as_day(today)
        window_end = as_day(window_end)
        occurrences: list[date] = []
        current = self.next_occurrence(rule, today)

        while current is not None and current <= window_end:
            if rule.end_date is not None and current > rule.end_date:
                break
            occurrences.append(current)

            if not rule.repeats:
                break
            if len(occurrences) >= MAX_OCCURRENCES:
                logger.warning(
                    "Rule '%s' hit the %d occurrence cap before %s",
                    rule.description,
                    MAX_OCCURRENCES,
                    window_end,
                )
                break

            following = self.step(rule, current)
            # A step that does not advance ends the expansion after one occurrence
            if following <= current:
                logger.warning(
                    "Rule '%s' does not advance with frequency %r; stopping expansion",
                    rule.description,
                    rule.frequency,
                )
                break
            current = following

        logger.debug(
            "Expanded '%s' into %d occurrence(s) up to %s",
            rule.description,
            len(occurrences),
            window_end,
        )
        return occurrences

    def step(self, rule: RecurrenceRule, current: date) -> date:
        """Advance one period from ``current``.

        Monthly rules with an anchor day land on that day, clamped to the
        last day of shorter months. Frequencies without a period return
        ``current`` unchanged.
        """
        frequency = rule.frequency
        if frequency == Frequency.WEEKLY:
            return current + timedelta(days=7)
        if frequency == Frequency.BIWEEKLY:
            return current + timedelta(days=14)
        if frequency == Frequency.MONTHLY:
            anchor_day = self._anchor_day(rule)
            if anchor_day is not None:
                # relativedelta clamps day=31 to the month's last day
                return current + relativedelta(months=1, day=anchor_day)
            return current + relativedelta(months=1)
        if frequency == Frequency.YEARLY:
            return current + relativedelta(years=1)
        return current

    def _anchor_day(self, rule: RecurrenceRule) -> Optional[int]:
        if rule.anchor_day is None or not 1 <= rule.anchor_day <= 31:
            return None
        return rule.anchor_day
