"""Filing reminders package."""

from tax_copilot.reminders.schedule import (
    FILING_CALENDAR,
    GSTR1,
    GSTR3B,
    GSTR9,
    ITR,
    FilingReminder,
    ReminderFrequency,
    ReminderStatus,
    ReminderView,
    days_left,
    evaluate_reminders,
    next_due,
    reminder_status,
)

__all__ = [
    "FILING_CALENDAR",
    "GSTR1",
    "GSTR3B",
    "GSTR9",
    "ITR",
    "FilingReminder",
    "ReminderFrequency",
    "ReminderStatus",
    "ReminderView",
    "days_left",
    "evaluate_reminders",
    "next_due",
    "reminder_status",
]
