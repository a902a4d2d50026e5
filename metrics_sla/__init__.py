"""Service level agreement boundaries for metrics histograms"""
from .boundary import (
    CountBoundary,
    DurationBoundary,
    ServiceLevelAgreementBoundary,
    project_boundaries,
)
from .converters import DurationConverter, StringToDurationConverter
from .errors import BoundaryError, DurationFormatError, NumericFormatError
from .models import Duration, MeterType

__all__ = [
    'ServiceLevelAgreementBoundary',
    'CountBoundary',
    'DurationBoundary',
    'project_boundaries',
    'DurationConverter',
    'StringToDurationConverter',
    'BoundaryError',
    'DurationFormatError',
    'NumericFormatError',
    'Duration',
    'MeterType',
]
