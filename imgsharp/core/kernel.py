"""Convolution kernels.

A Kernel is an immutable MxN matrix of real coefficients stored row-major.
The only kernel shipped with the package is the 3x3 discrete Laplacian used
by the sharpness estimators; any other kernel is supplied by the caller.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from .errors import MalformedKernelError

LAPLACIAN_3X3_COEFFICIENTS = (
    -1.0, -1.0, -1.0,
    -1.0, 8.0, -1.0,
    -1.0, -1.0, -1.0,
)


@dataclass(frozen=True)
class Kernel:
    """Immutable convolution kernel.

    Attributes:
        height: Number of kernel rows (> 0)
        width: Number of kernel columns (> 0)
        coefficients: Row-major coefficients, exactly height * width of them
    """
    height: int
    width: int
    coefficients: Tuple[float, ...]

    def __post_init__(self):
        if isinstance(self.height, bool) or not isinstance(self.height, (int, np.integer)) \
                or isinstance(self.width, bool) or not isinstance(self.width, (int, np.integer)):
            raise MalformedKernelError(
                f"Kernel dimensions must be integers, got {self.height!r}x{self.width!r}"
            )
        if self.height <= 0 or self.width <= 0:
            raise MalformedKernelError(
                f"Kernel dimensions must be positive, got {self.height}x{self.width}"
            )

        if isinstance(self.coefficients, (str, bytes, bytearray)):
            raise MalformedKernelError(
                f"Kernel coefficients must be a sequence of numbers, got {type(self.coefficients).__name__}"
            )
        try:
            coefficients = tuple(float(c) for c in self.coefficients)
        except (TypeError, ValueError) as e:
            raise MalformedKernelError(f"Kernel coefficients must be real numbers: {e}") from e

        expected = self.height * self.width
        if len(coefficients) != expected:
            raise MalformedKernelError(
                f"Kernel of size {self.height}x{self.width} needs {expected} coefficients, "
                f"got {len(coefficients)}"
            )

        object.__setattr__(self, "height", int(self.height))
        object.__setattr__(self, "width", int(self.width))
        object.__setattr__(self, "coefficients", coefficients)

    @classmethod
    def from_matrix(cls, matrix: Sequence[Sequence[float]] | np.ndarray) -> 'Kernel':
        """Build a kernel from a 2D array-like of coefficients.

        Examples:
            >>> Kernel.from_matrix([[0, 1], [1, 0]]).coefficients
            (0.0, 1.0, 1.0, 0.0)
        """
        try:
            array = np.asarray(matrix, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise MalformedKernelError(f"Kernel matrix must be rectangular and numeric: {e}") from e
        if array.ndim != 2:
            raise MalformedKernelError(f"Kernel matrix must be 2D, got {array.ndim}D")
        height, width = array.shape
        return cls(height, width, tuple(array.ravel().tolist()))

    @property
    def shape(self) -> Tuple[int, int]:
        return self.height, self.width

    @property
    def center(self) -> Tuple[int, int]:
        """Row and column of the cell aligned with the output pixel."""
        return self.height // 2, self.width // 2

    @property
    def matrix(self) -> np.ndarray:
        """Read-only (height, width) float64 view of the coefficients."""
        array = np.array(self.coefficients, dtype=np.float64).reshape(self.height, self.width)
        array.setflags(write=False)
        return array


def build_laplacian_3x3() -> Kernel:
    """Build the 3x3 discrete Laplacian (eight -1 neighbours, 8 in the center).

    Examples:
        >>> kernel = build_laplacian_3x3()
        >>> kernel.shape, sum(kernel.coefficients)
        ((3, 3), 0.0)
    """
    return Kernel(3, 3, LAPLACIAN_3X3_COEFFICIENTS)
