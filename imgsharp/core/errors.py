"""Exceptions raised by the convolution and sharpness functions."""


class SharpnessError(Exception):
    pass


class MalformedKernelError(SharpnessError, ValueError):
    """Kernel dimensions are not positive or do not match the coefficient count."""


class DimensionMismatchError(SharpnessError, ValueError):
    """Buffer shape does not match its declared dimensions, or RGB channels differ."""


class NoSignalError(SharpnessError, ArithmeticError):
    """A reduction had no samples to average over.

    Raised instead of returning NaN or infinity when a buffer is empty or
    when no filtered value exceeds the averaging threshold.
    """

    def __init__(self, message: str, sample_count: int = 0, threshold: float | None = None):
        super().__init__(message)
        self.sample_count = sample_count
        self.threshold = threshold
