"""
Filing Reminders

The fixed calendar of GST and income-tax returns, and the date arithmetic
that decides whether each one is filed, upcoming, due or overdue.

IMPORTANT: These windows are a nudge for the user, not a compliance
authority. A monthly return is shown as "completed" simply because its
due day is more than five days away; nothing checks that it was filed.
"""

import calendar
from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ReminderFrequency(str, Enum):
    MONTHLY = "monthly"
    ANNUAL = "annual"


class ReminderStatus(str, Enum):
    COMPLETED = "completed"
    UPCOMING = "upcoming"
    DUE = "due"
    OVERDUE = "overdue"


class FilingReminder(BaseModel):
    """
    A recurring filing obligation.

    Monthly obligations fall due on `due_day` of every month; annual ones
    on `due_day` of `due_month`.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    frequency: ReminderFrequency
    due_day: int = Field(..., ge=1, le=31)
    due_month: Optional[int] = Field(default=None, ge=1, le=12)
    gst_return: bool = Field(
        default=False,
        description="GST returns only apply to registered businesses"
    )

    @model_validator(mode='after')
    def validate_due_month(self) -> 'FilingReminder':
        if self.frequency == ReminderFrequency.ANNUAL and self.due_month is None:
            raise ValueError("Annual reminders need a due month")
        return self


class ReminderView(BaseModel):
    """A reminder evaluated against a particular day."""
    model_config = ConfigDict(frozen=True)

    reminder: FilingReminder
    status: ReminderStatus
    days_left: int = Field(..., ge=0)
    applicable: bool


GSTR1 = FilingReminder(
    id="gstr1",
    title="GSTR-1",
    frequency=ReminderFrequency.MONTHLY,
    due_day=10,
    gst_return=True,
)
GSTR3B = FilingReminder(
    id="gstr3b",
    title="GSTR-3B",
    frequency=ReminderFrequency.MONTHLY,
    due_day=20,
    gst_return=True,
)
GSTR9 = FilingReminder(
    id="gstr9",
    title="GSTR-9",
    frequency=ReminderFrequency.ANNUAL,
    due_day=31,
    due_month=12,
    gst_return=True,
)
ITR = FilingReminder(
    id="itr",
    title="ITR",
    frequency=ReminderFrequency.ANNUAL,
    due_day=31,
    due_month=7,
)

FILING_CALENDAR = (GSTR1, GSTR3B, GSTR9, ITR)


def reminder_status(reminder: FilingReminder, today: date) -> ReminderStatus:
    """Classify a reminder for the given day."""
    if reminder.frequency == ReminderFrequency.MONTHLY:
        if today.day < reminder.due_day - 5:
            return ReminderStatus.COMPLETED
        if today.day < reminder.due_day:
            return ReminderStatus.UPCOMING
        if today.day == reminder.due_day:
            return ReminderStatus.DUE
        return ReminderStatus.OVERDUE

    if today.month < reminder.due_month:
        return ReminderStatus.UPCOMING
    if today.month == reminder.due_month and today.day <= reminder.due_day:
        return ReminderStatus.DUE
    return ReminderStatus.OVERDUE


def days_left(reminder: FilingReminder, today: date) -> int:
    """
    Days until the next due date of a monthly reminder.

    Once this month's due day has passed, counts to next month's
    occurrence using the length of the current month. Annual reminders
    report 0; the UI shows their fixed due date instead.
    """
    if reminder.frequency != ReminderFrequency.MONTHLY:
        return 0

    if today.day <= reminder.due_day:
        return reminder.due_day - today.day

    days_in_month = calendar.monthrange(today.year, today.month)[1]
    return days_in_month - today.day + reminder.due_day


def evaluate_reminders(
    today: date,
    requires_registration: bool,
    reminders: tuple[FilingReminder, ...] = FILING_CALENDAR,
) -> list[ReminderView]:
    """Evaluate every reminder for `today`, in calendar order."""
    return [
        ReminderView(
            reminder=reminder,
            status=reminder_status(reminder, today),
            days_left=days_left(reminder, today),
            applicable=requires_registration or not reminder.gst_return,
        )
        for reminder in reminders
    ]


def next_due(
    today: date,
    requires_registration: bool,
    reminders: tuple[FilingReminder, ...] = FILING_CALENDAR,
) -> Optional[ReminderView]:
    """
    The monthly return with the fewest days left, for the dashboard card.

    Shown whether or not the business is registered yet; `applicable`
    on the returned view tells the two cases apart. Ties go to the
    earlier reminder in calendar order.
    """
    monthly = [
        view for view in evaluate_reminders(today, requires_registration, reminders)
        if view.reminder.frequency == ReminderFrequency.MONTHLY
    ]
    if not monthly:
        return None
    return min(monthly, key=lambda view: view.days_left)
