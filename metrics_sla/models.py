"""Meter and duration models used by SLA boundaries"""
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Dict

LONG_MIN = -(2 ** 63)
LONG_MAX = 2 ** 63 - 1


class MeterType(Enum):
    """Kinds of meter a boundary can be applied to"""
    COUNTER = "counter"
    GAUGE = "gauge"
    LONG_TASK_TIMER = "long_task_timer"
    TIMER = "timer"
    DISTRIBUTION_SUMMARY = "distribution_summary"
    OTHER = "other"


# Nanoseconds per unit
UNIT_NANOS: Dict[str, int] = {
    "ns": 1,
    "us": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
    "d": 86400 * 1_000_000_000,
}


def fits_long(value: int) -> bool:
    """Check whether an integer is representable as a signed 64-bit long"""
    return LONG_MIN <= value <= LONG_MAX


def saturated(value: int) -> int:
    """Clamp an integer to the signed 64-bit long range"""
    return max(LONG_MIN, min(LONG_MAX, value))


@dataclass(frozen=True)
class Duration:
    """Immutable time span with nanosecond precision"""
    nanos: int

    @classmethod
    def of(cls, amount: int, unit: str) -> "Duration":
        """Build a duration from an integer amount of a unit (ns, us, ms, s, m, h, d)"""
        try:
            factor = UNIT_NANOS[unit.lower()]
        except KeyError:
            raise ValueError(f"Unknown duration unit: {unit}") from None
        return cls(amount * factor)

    @classmethod
    def from_timedelta(cls, value: timedelta) -> "Duration":
        """Convert a timedelta exactly, without going through float seconds"""
        micros = (value.days * 86400 + value.seconds) * 1_000_000 + value.microseconds
        return cls(micros * 1_000)

    def to_nanos(self) -> int:
        return self.nanos

    def to_timedelta(self) -> timedelta:
        """Convert to a timedelta, truncating sub-microsecond precision"""
        micros = abs(self.nanos) // 1_000
        return timedelta(microseconds=-micros if self.nanos < 0 else micros)

    def is_negative(self) -> bool:
        return self.nanos < 0

    def __str__(self) -> str:
        return f"{self.nanos}ns"
