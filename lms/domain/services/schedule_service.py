# lms/domain/services/schedule_service.py

from datetime import datetime, timedelta
from typing import Iterable, Optional

from lms.domain.models.academic_period_domain_model import AcademicPeriod
from lms.domain.models.course_group_domain_model import (
    ScheduleBuckets,
    Weekday,
    WeeklySlot,
    format_clock,
)


class ScheduleService:
    """
    Domain service that classifies weekly course group slots.

    All methods are pure functions of ``now``, the slot and the current
    academic period.
    """

    @staticmethod
    def is_active(now: datetime, slot: WeeklySlot, period: AcademicPeriod) -> bool:
        """
        Check whether the slot is taking place at ``now``.

        Both ends of the range are inclusive: at exactly ``to`` the slot
        still counts as active.
        """
        if not slot.belongs_to(period):
            return False
        if slot.day != Weekday.from_datetime(now):
            return False
        current_time = format_clock(now)
        return slot.from_time <= current_time <= slot.to_time

    @staticmethod
    def is_upcoming(now: datetime, slot: WeeklySlot, period: AcademicPeriod) -> bool:
        """
        Check whether the slot starts later today or later this week.

        The week is not wrapped: once a weekday has passed, its slots are
        not upcoming again until that day comes back round.
        """
        if not slot.belongs_to(period):
            return False

        today = Weekday.from_datetime(now)
        if slot.day == today:
            return format_clock(now) < slot.from_time

        # Monday first, so on a sunday a saturday slot is "other", never upcoming.
        return slot.day.position > today.position

    @staticmethod
    def next_occurrence(now: datetime, slot: WeeklySlot) -> datetime:
        """
        Compute when the slot next starts.

        A slot scheduled for today whose start has already been reached
        next occurs one week later. The returned datetime keeps the tzinfo
        of ``now``.
        """
        today = Weekday.from_datetime(now)
        days_until_next = (slot.day.position - today.position) % 7
        if days_until_next == 0 and format_clock(now) >= slot.from_time:
            days_until_next = 7

        hours, minutes = slot.start
        start = now.replace(hour=hours, minute=minutes, second=0, microsecond=0)
        return start + timedelta(days=days_until_next)

    @classmethod
    def categorize(
            cls,
            now: datetime,
            slots: Iterable[WeeklySlot],
            period: AcademicPeriod,
    ) -> ScheduleBuckets:
        """
        Split slots into current, upcoming and other buckets.

        Upcoming slots are sorted by their next occurrence; ties keep the
        input order.
        """
        buckets = ScheduleBuckets()

        for slot in slots:
            if cls.is_active(now, slot, period):
                buckets.current.append(slot)
            elif cls.is_upcoming(now, slot, period):
                buckets.upcoming.append(slot)
            else:
                buckets.other.append(slot)

        buckets.upcoming.sort(key=lambda slot: cls.next_occurrence(now, slot))
        return buckets

    @classmethod
    def next_upcoming(
            cls,
            now: datetime,
            slots: Iterable[WeeklySlot],
            period: AcademicPeriod,
    ) -> Optional[WeeklySlot]:
        """Return the soonest upcoming slot, if any."""
        upcoming = cls.categorize(now, slots, period).upcoming
        return upcoming[0] if upcoming else None

    @staticmethod
    def describe(slot: WeeklySlot) -> str:
        """Human readable schedule, e.g. ``Monday 09:00-11:00``."""
        return f"{slot.day.value.capitalize()} {slot.from_time}-{slot.to_time}"

    @classmethod
    def time_until(cls, now: datetime, slot: WeeklySlot) -> str:
        """Human readable delay until the next occurrence of the slot."""
        remaining = (cls.next_occurrence(now, slot) - now).total_seconds()
        if remaining <= 0:
            return "Now"

        hours = int(remaining // 3600)
        minutes = int((remaining % 3600) // 60)
        days = hours // 24

        if days > 0:
            return f"In {days} day{'s' if days > 1 else ''}"
        if hours > 0:
            return f"In {hours}h {minutes}m"
        return f"In {minutes}m"
