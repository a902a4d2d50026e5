"""Duration text converters used when parsing SLA boundaries"""
import abc
import re

from .errors import DurationFormatError
from .models import Duration, UNIT_NANOS


class DurationConverter(abc.ABC):
    """Converts free-form duration text into a Duration"""

    @abc.abstractmethod
    def convert(self, text: str) -> Duration:
        """Return the duration for text or raise DurationFormatError"""
        pass


class StringToDurationConverter(DurationConverter):
    """Accepts simple values like '200ms' or '10s' and ISO-8601 values like 'PT0.2S'

    Negative durations are rejected. Instances hold no mutable state and can be
    shared between threads.
    """

    SIMPLE_PATTERN = re.compile(r"^\s*([+-]?\d+)\s*([a-z]{1,2})\s*$", re.IGNORECASE)
    ISO8601_PATTERN = re.compile(
        r"^([+-])?P(?:(\d+)D)?(?:T(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)(?:[.,](\d{1,9}))?S)?)?$",
        re.IGNORECASE,
    )

    def convert(self, text: str) -> Duration:
        if not isinstance(text, str):
            raise DurationFormatError(repr(text), "not a duration string")

        duration = self._parse(text, text.strip())
        if duration.is_negative():
            raise DurationFormatError(text, "a negative duration")
        return duration

    def _parse(self, text: str, candidate: str) -> Duration:
        match = self.SIMPLE_PATTERN.match(candidate)
        if match:
            return self._convert_simple(text, match)

        match = self.ISO8601_PATTERN.match(candidate)
        if match:
            return self._convert_iso8601(text, candidate, match)

        raise DurationFormatError(text)

    def _convert_simple(self, text: str, match: re.Match) -> Duration:
        amount, unit = match.groups()
        unit = unit.lower()
        if unit not in UNIT_NANOS:
            raise DurationFormatError(text, f"using an unknown unit '{unit}'")
        return Duration.of(int(amount), unit)

    def _convert_iso8601(self, text: str, candidate: str, match: re.Match) -> Duration:
        sign, days, hours, minutes, seconds, fraction = match.groups()
        if days is None and hours is None and minutes is None and seconds is None:
            raise DurationFormatError(text)
        # 'T' must be followed by at least one time component
        if "t" in candidate.lower() and hours is None and minutes is None and seconds is None:
            raise DurationFormatError(text)

        nanos = 0
        for amount, unit in ((days, "d"), (hours, "h"), (minutes, "m"), (seconds, "s")):
            if amount is not None:
                nanos += int(amount) * UNIT_NANOS[unit]
        if fraction:
            nanos += int(fraction.ljust(9, "0"))
        return Duration(-nanos if sign == "-" else nanos)
