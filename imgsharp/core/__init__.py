"""
Convolution and sharpness estimation.

    kernel:      Kernel and the built-in 3x3 Laplacian
    buffers:     PixelBuffer and RGBImage containers
    convolution: convolve, convolve_rgb
    sharpness:   variance_sharpness, average_sharpness and their reductions
    errors:      exception taxonomy
"""

from .buffers import PixelBuffer, RGBImage, normalize_buffer
from .convolution import convolve, convolve_rgb
from .errors import DimensionMismatchError, MalformedKernelError, NoSignalError, SharpnessError
from .kernel import Kernel, build_laplacian_3x3
from .sharpness import (
    average_sharpness,
    get_average,
    get_variance,
    threshold_average,
    variance_sharpness,
)

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
