"""Service level agreement boundaries for timer and distribution summary histograms"""
import abc
from dataclasses import dataclass
from datetime import timedelta
from typing import Iterable, List, Optional, Union

from logging_config import get_logger
from .converters import DurationConverter, StringToDurationConverter
from .errors import DurationFormatError, NumericFormatError
from .models import Duration, MeterType, fits_long, saturated


logger = get_logger(__name__)

DEFAULT_DURATION_CONVERTER: DurationConverter = StringToDurationConverter()

NANOS_PER_MILLI = 1_000_000


class ServiceLevelAgreementBoundary(abc.ABC):
    """A service level agreement boundary.

    Either a count (applicable to timers and distribution summaries) or a
    duration (applicable to timers only). Use ``from_count``, ``from_duration``
    or ``parse`` to build one.
    """

    @abc.abstractmethod
    def value_for(self, meter_type: MeterType) -> Optional[int]:
        """Return the boundary in a form suitable for the given meter type.

        Timer values are in nanoseconds, distribution summary values are the
        raw count. Returns None when the boundary cannot be applied.
        """
        pass

    @staticmethod
    def from_count(value: int) -> "CountBoundary":
        return CountBoundary(value)

    @staticmethod
    def from_duration(value: Union[Duration, timedelta]) -> "DurationBoundary":
        if isinstance(value, timedelta):
            value = Duration.from_timedelta(value)
        return DurationBoundary(value)

    @classmethod
    def parse(cls, text: str, converter: Optional[DurationConverter] = None) -> "ServiceLevelAgreementBoundary":
        """Parse a boundary from configuration text.

        Text made only of decimal digits is a count; anything else goes to the
        duration converter. Empty text counts as numeric and fails to parse.
        """
        if not isinstance(text, str):
            raise TypeError(f"Boundary text must be a str, got {type(text).__name__}")

        if _is_number(text):
            try:
                count = int(text)
            except ValueError as e:
                logger.debug("Rejected numeric SLA boundary", value=text, event_type="sla_parse_error")
                raise NumericFormatError(text) from e
            try:
                return cls.from_count(count)
            except NumericFormatError:
                logger.debug("Rejected numeric SLA boundary", value=text, event_type="sla_parse_error")
                raise

        if converter is None:
            converter = DEFAULT_DURATION_CONVERTER
        try:
            duration = converter.convert(text)
        except DurationFormatError as e:
            logger.debug("Rejected duration SLA boundary", value=text, error=str(e), event_type="sla_parse_error")
            raise
        return cls.from_duration(duration)


@dataclass(frozen=True)
class CountBoundary(ServiceLevelAgreementBoundary):
    """Unit-less boundary, read as milliseconds when applied to timers"""
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Count boundary must be an int, got {type(self.value).__name__}")
        if not fits_long(self.value):
            raise NumericFormatError(str(self.value), "out of range for a long")

    def value_for(self, meter_type: MeterType) -> Optional[int]:
        if meter_type == MeterType.DISTRIBUTION_SUMMARY:
            return self.value
        if meter_type == MeterType.TIMER:
            return saturated(self.value * NANOS_PER_MILLI)
        return None


@dataclass(frozen=True)
class DurationBoundary(ServiceLevelAgreementBoundary):
    """Time span boundary, only applicable to timers"""
    value: Duration

    def __post_init__(self):
        if not isinstance(self.value, Duration):
            raise TypeError(f"Duration boundary must be a Duration, got {type(self.value).__name__}")
        if not fits_long(self.value.to_nanos()):
            raise DurationFormatError(str(self.value), "too long to express in nanoseconds")

    def value_for(self, meter_type: MeterType) -> Optional[int]:
        if meter_type == MeterType.TIMER:
            return self.value.to_nanos()
        return None


def project_boundaries(boundaries: Iterable[ServiceLevelAgreementBoundary], meter_type: MeterType) -> List[int]:
    """Project boundaries onto a meter type, dropping those that do not apply"""
    values = []
    for boundary in boundaries:
        value = boundary.value_for(meter_type)
        if value is not None:
            values.append(value)
    return values


def _is_number(text: str) -> bool:
    # Vacuously true for empty text
    return all(ch.isdecimal() for ch in text)
