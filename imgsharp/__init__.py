"""
imgsharp - Laplacian-based image sharpness estimation.

Package structure:
    imgsharp/
        core/    - Kernels, pixel buffers, convolution and sharpness reductions
        config/  - Immutable settings loaded from IMGSHARP_* environment variables
        utils/   - Logging and string conversion helpers

Typical use:
    >>> from imgsharp import PixelBuffer, variance_sharpness
    >>> variance_sharpness(PixelBuffer([[0.0, 0.0], [0.0, 0.0]]))
    0.0
"""

from .core import (
    DimensionMismatchError,
    Kernel,
    MalformedKernelError,
    NoSignalError,
    PixelBuffer,
    RGBImage,
    SharpnessError,
    average_sharpness,
    build_laplacian_3x3,
    convolve,
    convolve_rgb,
    get_average,
    get_variance,
    normalize_buffer,
    threshold_average,
    variance_sharpness,
)

__version__ = "1.0.0"
__all__ = [
    "Kernel",
    "build_laplacian_3x3",
    "PixelBuffer",
    "RGBImage",
    "normalize_buffer",
    "convolve",
    "convolve_rgb",
    "get_average",
    "get_variance",
    "threshold_average",
    "variance_sharpness",
    "average_sharpness",
    "SharpnessError",
    "MalformedKernelError",
    "DimensionMismatchError",
    "NoSignalError",
]
