"""Pixel containers.

PixelBuffer owns a private, read-only 2D copy of one channel of samples and
checks every indexed access against its height and width. RGBImage groups
three equally sized PixelBuffers.
"""

from dataclasses import dataclass
from typing import Iterable, Tuple

import numpy as np

from ..config.settings import ACCUMULATOR_DTYPE, SAMPLE_DTYPE
from .errors import DimensionMismatchError


def _check_dimension(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise DimensionMismatchError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise DimensionMismatchError(f"{name} must be non-negative, got {value}")
    return int(value)


class PixelBuffer:
    """Rectangular single-channel grid of real samples, row-major.

    Args:
        data: 2D array-like of samples, copied on construction
        dtype: Sample dtype to store (float32 unless told otherwise)

    Raises:
        DimensionMismatchError: If data is not two-dimensional
    """

    __slots__ = ("_data",)

    def __init__(self, data, dtype=SAMPLE_DTYPE):
        if isinstance(data, PixelBuffer):
            data = data.view()
        array = np.array(data, dtype=dtype)
        if array.ndim != 2:
            raise DimensionMismatchError(
                f"PixelBuffer needs a 2D array, got shape {array.shape}"
            )
        array.setflags(write=False)
        self._data = array

    @classmethod
    def from_flat(cls, values: Iterable[float] | np.ndarray, height: int, width: int,
                  dtype=SAMPLE_DTYPE) -> 'PixelBuffer':
        """Build a buffer from a flat row-major sequence and explicit dimensions.

        Examples:
            >>> buf = PixelBuffer.from_flat([1, 2, 3, 4, 5, 6], 2, 3)
            >>> buf.shape, buf[1, 0]
            ((2, 3), 4.0)
        """
        height = _check_dimension("height", height)
        width = _check_dimension("width", width)
        if not isinstance(values, np.ndarray):
            values = list(values)
        flat = np.asarray(values, dtype=dtype).reshape(-1)
        if flat.size != height * width:
            raise DimensionMismatchError(
                f"Buffer of {flat.size} samples does not match {height}x{width} "
                f"({height * width} samples)"
            )
        return cls(flat.reshape(height, width), dtype=dtype)

    @classmethod
    def zeros(cls, height: int, width: int, dtype=SAMPLE_DTYPE) -> 'PixelBuffer':
        height = _check_dimension("height", height)
        width = _check_dimension("width", width)
        return cls(np.zeros((height, width), dtype=dtype), dtype=dtype)

    @property
    def height(self) -> int:
        return self._data.shape[0]

    @property
    def width(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self.height, self.width

    @property
    def size(self) -> int:
        return self._data.size

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, key: Tuple[int, int]) -> float:
        try:
            y, x = key
        except (TypeError, ValueError):
            raise TypeError(f"PixelBuffer index must be a (y, x) pair, got {key!r}") from None
        if not (0 <= y < self.height and 0 <= x < self.width):
            raise IndexError(f"Pixel ({y}, {x}) outside {self.height}x{self.width} buffer")
        return float(self._data[y, x])

    def __eq__(self, other) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def __repr__(self) -> str:
        return f"PixelBuffer(height={self.height}, width={self.width}, dtype={self.dtype})"

    def as_array(self) -> np.ndarray:
        """Writable copy of the samples with shape (height, width)."""
        return self._data.copy()

    def flat(self) -> np.ndarray:
        """Writable row-major 1D copy of the samples."""
        return self._data.ravel().copy()

    def view(self) -> np.ndarray:
        """Read-only view of the samples, for internal numeric code."""
        return self._data


def normalize_buffer(buffer: PixelBuffer) -> PixelBuffer:
    """Min-max normalize a buffer into [0, 1].

    The range is computed in float64. A constant buffer maps to all zeros and
    an empty buffer is returned as is.

    Examples:
        >>> normalize_buffer(PixelBuffer([[2.0, 4.0], [6.0, 10.0]])).flat().tolist()
        [0.0, 0.25, 0.5, 1.0]
    """
    if buffer.size == 0:
        return buffer

    samples = buffer.view().astype(ACCUMULATOR_DTYPE)
    low = samples.min()
    span = samples.max() - low
    if span == 0:
        return PixelBuffer.zeros(buffer.height, buffer.width, dtype=buffer.dtype)
    return PixelBuffer((samples - low) / span, dtype=buffer.dtype)


@dataclass(frozen=True)
class RGBImage:
    """Three PixelBuffers of identical dimensions.

    Raises:
        DimensionMismatchError: If the channel shapes differ
    """
    r: PixelBuffer
    g: PixelBuffer
    b: PixelBuffer

    def __post_init__(self):
        shapes = {channel.shape for channel in self.channels()}
        if len(shapes) != 1:
            raise DimensionMismatchError(
                f"RGB channels must share dimensions, got r={self.r.shape}, "
                f"g={self.g.shape}, b={self.b.shape}"
            )

    @classmethod
    def from_array(cls, image: np.ndarray, dtype=SAMPLE_DTYPE) -> 'RGBImage':
        """Split an (H, W, 3) array into channels."""
        array = np.asarray(image)
        if array.ndim != 3 or array.shape[2] != 3:
            raise DimensionMismatchError(
                f"RGB image needs shape (H, W, 3), got {array.shape}"
            )
        return cls(
            PixelBuffer(array[:, :, 0], dtype=dtype),
            PixelBuffer(array[:, :, 1], dtype=dtype),
            PixelBuffer(array[:, :, 2], dtype=dtype),
        )

    @property
    def height(self) -> int:
        return self.r.height

    @property
    def width(self) -> int:
        return self.r.width

    @property
    def shape(self) -> Tuple[int, int]:
        return self.r.shape

    def channels(self) -> Tuple[PixelBuffer, PixelBuffer, PixelBuffer]:
        return self.r, self.g, self.b

    def as_array(self) -> np.ndarray:
        """Stack the channels back into an (H, W, 3) array."""
        return np.stack([channel.view() for channel in self.channels()], axis=2)
