# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class TimeEntry(TypedDict):
    date: pendulum.Date
    start: pendulum.DateTime
    end: pendulum.DateTime
    duration: pendulum.Duration
    description: str
