from __future__ import annotations

from datetime import time
from enum import Enum

OFF_PEAK_HOURS = range(0, 6)
PEAK_HOURS = range(17, 21)


class TimeOfUse(Enum):
    """TOU bucket for a wall-clock hour. Values match the `TouRates` fields."""

    OFF = "off"
    MID = "mid"
    PEAK = "peak"

    @classmethod
    def from_hour(cls, hour: int) -> "TimeOfUse":
        if not 0 <= hour <= 23:
            raise ValueError(f"Invalid hour: {hour}")
        if hour in OFF_PEAK_HOURS:
            return cls.OFF
        if hour in PEAK_HOURS:
            return cls.PEAK
        return cls.MID

    @classmethod
    def from_time(cls, value: time) -> "TimeOfUse":
        return cls.from_hour(value.hour)
