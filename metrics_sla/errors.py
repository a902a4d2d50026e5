"""Error types raised while building SLA boundaries"""


class BoundaryError(ValueError):
    """Base class for SLA boundary construction failures"""


class NumericFormatError(BoundaryError):
    """Numeric boundary text is empty or does not fit in a signed 64-bit long"""

    def __init__(self, value: str, reason: str = "not a valid long"):
        self.value = value
        super().__init__(f"'{value}' is {reason}")


class DurationFormatError(BoundaryError):
    """Duration text could not be converted"""

    def __init__(self, value: str, reason: str = "not a valid duration"):
        self.value = value
        super().__init__(f"'{value}' is {reason}")
