"""2D convolution of pixel buffers with an arbitrary kernel.

Kernel cell (fy, fx) is applied to input pixel (y + fy - cy, x + fx - cx),
where (cy, cx) is the kernel center; the kernel is not flipped. Taps that
fall outside the input are skipped, so border pixels are weighted sums over
fewer taps and are not renormalized.
"""

import numpy as np

from ..config.settings import ACCUMULATOR_DTYPE
from ..utils.logging import get_logger
from .buffers import PixelBuffer, RGBImage
from .kernel import Kernel

log = get_logger(__name__)


def _tap_bounds(offset: int, length: int) -> tuple[int, int]:
    """Output index range [start, stop) whose tap at ``offset`` stays inside ``length``."""
    return max(0, -offset), min(length, length - offset)


def convolve(kernel: Kernel, image: PixelBuffer) -> PixelBuffer:
    """Filter a single-channel buffer with a kernel.

    Each tap is accumulated over the whole overlapping region at once, in
    float64, and the result is stored in the input's sample dtype.

    Args:
        kernel: Kernel of any size
        image: Input buffer, left untouched

    Returns:
        New buffer with the same height, width and dtype as ``image``

    Examples:
        >>> from imgsharp.core.kernel import build_laplacian_3x3
        >>> spike = PixelBuffer([[0, 0, 0], [0, 1, 0], [0, 0, 0]])
        >>> convolve(build_laplacian_3x3(), spike)[1, 1]
        8.0
    """
    height, width = image.shape
    log.debug("Convolving %dx%d buffer with %dx%d kernel", height, width, kernel.height, kernel.width)

    source = image.view().astype(ACCUMULATOR_DTYPE)
    accumulator = np.zeros((height, width), dtype=ACCUMULATOR_DTYPE)
    coefficients = kernel.matrix
    center_y, center_x = kernel.center

    for fy in range(kernel.height):
        dy = fy - center_y
        y0, y1 = _tap_bounds(dy, height)
        if y0 >= y1:
            continue
        for fx in range(kernel.width):
            dx = fx - center_x
            x0, x1 = _tap_bounds(dx, width)
            if x0 >= x1:
                continue
            accumulator[y0:y1, x0:x1] += coefficients[fy, fx] * source[y0 + dy:y1 + dy, x0 + dx:x1 + dx]

    return PixelBuffer(accumulator, dtype=image.dtype)


def convolve_rgb(kernel: Kernel, image: RGBImage) -> RGBImage:
    """Filter each channel of an RGB image independently."""
    return RGBImage(
        convolve(kernel, image.r),
        convolve(kernel, image.g),
        convolve(kernel, image.b),
    )
