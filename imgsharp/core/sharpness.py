"""Sharpness estimation from the Laplacian response of an image.

Two reductions of the filtered buffer are provided:

* ``variance_sharpness``: population variance of every filtered value.
* ``average_sharpness``: mean of the filtered values strictly above a
  threshold (0.2 by default). Negative responses never count, however
  strong, so an edge contributes only through its positive side.

Samples may be float32, but every sum is accumulated in float64 so that
small values are not lost against a large running total on big images.
"""

import numpy as np

from ..config.settings import ACCUMULATOR_DTYPE, DEFAULT_THRESHOLD
from ..utils.logging import get_logger, timed
from .buffers import PixelBuffer
from .convolution import convolve
from .errors import NoSignalError
from .kernel import build_laplacian_3x3

log = get_logger(__name__)


def _samples(values: PixelBuffer | np.ndarray) -> np.ndarray:
    if isinstance(values, PixelBuffer):
        values = values.view()
    return np.asarray(values).reshape(-1)


def get_average(values: PixelBuffer | np.ndarray) -> float:
    """Mean of all samples, accumulated in float64.

    Raises:
        NoSignalError: If there are no samples
    """
    samples = _samples(values)
    if samples.size == 0:
        raise NoSignalError("Cannot average an empty buffer", sample_count=0)
    total = np.sum(samples, dtype=ACCUMULATOR_DTYPE)
    return float(total / samples.size)


def get_variance(values: PixelBuffer | np.ndarray, average: float) -> float:
    """Population variance of the samples around ``average``.

    Squared deviations are summed in float64 and divided by the sample
    count, not count - 1.

    Raises:
        NoSignalError: If there are no samples
    """
    samples = _samples(values)
    if samples.size == 0:
        raise NoSignalError("Cannot take the variance of an empty buffer", sample_count=0)
    deviations = samples.astype(ACCUMULATOR_DTYPE) - average
    return float(np.sum(deviations * deviations, dtype=ACCUMULATOR_DTYPE) / samples.size)


def threshold_average(values: PixelBuffer | np.ndarray, threshold: float = DEFAULT_THRESHOLD) -> float:
    """Mean of the samples strictly greater than ``threshold``.

    Args:
        values: Filtered buffer or array
        threshold: Cut-off, 0.2 unless given

    Returns:
        Average of the qualifying samples

    Raises:
        NoSignalError: If no sample exceeds the threshold

    Examples:
        >>> threshold_average(np.array([0.1, 0.3, -5.0, 0.5]))
        0.4
    """
    samples = _samples(values)
    selected = samples[samples > threshold]
    if selected.size == 0:
        raise NoSignalError(
            f"No filtered value exceeds the threshold {threshold} "
            f"({samples.size} samples checked)",
            sample_count=samples.size,
            threshold=threshold,
        )
    total = np.sum(selected, dtype=ACCUMULATOR_DTYPE)
    return float(total / selected.size)


def variance_sharpness(image: PixelBuffer) -> float:
    """Variance of the Laplacian response of ``image``.

    Raises:
        NoSignalError: If the buffer is empty
    """
    if image.size == 0:
        raise NoSignalError("Cannot estimate sharpness of an empty buffer", sample_count=0)

    filtered = convolve(build_laplacian_3x3(), image)

    with timed("getting average of laplacian", log):
        average = get_average(filtered)
    with timed("getting the variance of laplacian", log):
        variance = get_variance(filtered, average)

    log.debug("Laplacian variance of %dx%d buffer: %f", image.height, image.width, variance)
    return variance


def average_sharpness(image: PixelBuffer, threshold: float = DEFAULT_THRESHOLD) -> float:
    """Mean Laplacian response of ``image`` above ``threshold``.

    Raises:
        NoSignalError: If no filtered value exceeds the threshold, which is
            what a flat or heavily blurred image produces
    """
    filtered = convolve(build_laplacian_3x3(), image)

    with timed("getting thresholded average of laplacian", log):
        sharpness = threshold_average(filtered, threshold)

    log.debug("Laplacian thresholded average of %dx%d buffer: %f", image.height, image.width, sharpness)
    return sharpness
