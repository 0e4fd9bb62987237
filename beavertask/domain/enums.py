from __future__ import annotations

from enum import StrEnum


class TaskGroupKey(StrEnum):
    OVERDUE = "overdue"
    UPCOMING = "upcoming"
    NO_DUE_DATE = "no_due_date"
    COMPLETED = "completed"


class ActiveView(StrEnum):
    CALENDAR = "calendar"
    TASK_LIST = "tasklist"


class ModalState(StrEnum):
    CLOSED = "closed"
    OPEN = "open"


COLOR_SWATCHES = [
    "#f89422",
    "#e5484d",
    "#30a46c",
    "#0091ff",
    "#8e4ec6",
    "#6f6e77",
]

DEFAULT_COLOR = COLOR_SWATCHES[0]

REMINDER_OPTIONS = [
    ("Aucun rappel", 0),
    ("5 min avant", 5),
    ("15 min avant", 15),
    ("30 min avant", 30),
    ("1 heure avant", 60),
    ("1 jour avant", 1440),
]
