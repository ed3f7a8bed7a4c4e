"""
Time Span Module

Duration in whole hours and minutes. Every value is kept normalized
(hours >= 0, 0 <= minutes < 60) by re-splitting the total minutes after
each change. Invalid input never raises: construction falls back to zero
and mutations become no-ops.
"""

from typing import Optional

from .logging_config import get_logger, log_action


logger = get_logger("opnu_lab.timespan")

MINUTES_PER_HOUR = 60


def _is_valid(hours: int, minutes: int) -> bool:
    return hours >= 0 and 0 <= minutes < MINUTES_PER_HOUR


class TimeSpan:
    """Span of time in hours and minutes"""

    def __init__(self, hours: int, minutes: int):
        if _is_valid(hours, minutes):
            self._set_total(hours * MINUTES_PER_HOUR + minutes)
        else:
            log_action(logger, "debug", "Invalid time span, using zero",
                       action="create_timespan", extra={"hours": hours, "minutes": minutes})
            self._hours = 0
            self._minutes = 0

    def _set_total(self, total_minutes: int) -> None:
        self._hours, self._minutes = divmod(total_minutes, MINUTES_PER_HOUR)

    @property
    def hours(self) -> int:
        return self._hours

    @property
    def minutes(self) -> int:
        return self._minutes

    def get_hours(self) -> int:
        return self._hours

    def get_minutes(self) -> int:
        return self._minutes

    def add(self, hours: int, minutes: int) -> None:
        """Add hours and minutes; ignored if negative or minutes >= 60"""
        if not _is_valid(hours, minutes):
            log_action(logger, "debug", "Add ignored: invalid duration",
                       action="add", extra={"hours": hours, "minutes": minutes})
            return
        self._set_total(self.get_total_minutes() + hours * MINUTES_PER_HOUR + minutes)

    def add_time_span(self, timespan: Optional['TimeSpan']) -> None:
        """Add another span; None is ignored"""
        if timespan is not None:
            self.add(timespan.get_hours(), timespan.get_minutes())

    def get_total_hours(self) -> float:
        """Total as fractional hours, e.g. 9h 45m -> 9.75"""
        return self._hours + self._minutes / float(MINUTES_PER_HOUR)

    def get_total_minutes(self) -> int:
        """Total in minutes, e.g. 2h 30m -> 150"""
        return self._hours * MINUTES_PER_HOUR + self._minutes

    def subtract(self, span: Optional['TimeSpan']) -> None:
        """
        Subtract another span.

        Ignored when span is None or longer than this one, so the result
        never goes negative.
        """
        if span is None:
            return

        current_total = self.get_total_minutes()
        span_total = span.get_total_minutes()

        if span_total > current_total:
            log_action(logger, "debug", "Subtract ignored: span exceeds current total",
                       action="subtract", extra={"current": current_total, "span": span_total})
            return

        self._set_total(current_total - span_total)

    def scale(self, factor: int) -> None:
        """Multiply the span by a positive integer factor"""
        if factor <= 0:
            log_action(logger, "debug", "Scale ignored: non-positive factor",
                       action="scale", extra={"factor": factor})
            return
        self._set_total(self.get_total_minutes() * factor)

    def __repr__(self) -> str:
        return f"TimeSpan(hours={self._hours}, minutes={self._minutes})"

    def __str__(self) -> str:
        return f"{self._hours}h {self._minutes}m"
