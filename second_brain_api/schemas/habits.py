# File: /second_brain_api/schemas/habits.py | Version: 1.0 | Title: Habit check-in bodies
from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import Field

from second_brain_api.schemas._base import CamelModel


class HabitCheckIn(CamelModel):
    # defaults to today when omitted
    date: Optional[dt.date] = None
    value: Optional[float] = Field(default=None, ge=0)
    notes: Optional[str] = Field(default=None, max_length=500)


class HabitUncheck(CamelModel):
    date: Optional[dt.date] = None
