import numpy as np
import dataclasses
from typing import Sequence, Tuple

# Both components are stored at this precision
COMPLEX_DTYPE = np.complex128
FLOAT_DTYPE = np.float64


class FFTError(ValueError):
    """Base class for input errors raised by the transform."""


class InvalidLengthError(FFTError):
    def __init__(self, length: int):
        self.length = length
        super().__init__(
            f"Input length must be 0 or a power of two, got {length}."
        )


class LengthMismatchError(FFTError):
    def __init__(self, real_length: int, imag_length: int):
        self.real_length = real_length
        self.imag_length = imag_length
        super().__init__(
            f"Real and imaginary parts differ in length: "
            f"{real_length} != {imag_length}."
        )


@dataclasses.dataclass(eq=False)
class ComplexSequence:
    real: np.ndarray  # Real parts
    imag: np.ndarray  # Imaginary parts

    def __post_init__(self):
        self.real = np.array(self.real, dtype=FLOAT_DTYPE)
        self.imag = np.array(self.imag, dtype=FLOAT_DTYPE)
        if self.real.ndim != 1 or self.imag.ndim != 1:
            raise FFTError(
                f"Expected 1-D real and imaginary parts, got shapes "
                f"{self.real.shape} and {self.imag.shape}."
            )
        if len(self.real) != len(self.imag):
            raise LengthMismatchError(len(self.real), len(self.imag))

    def __len__(self) -> int:
        return len(self.real)

    def __eq__(self, other):
        if not isinstance(other, ComplexSequence):
            return NotImplemented
        return np.array_equal(self.real, other.real) and np.array_equal(self.imag, other.imag)

    @classmethod
    def from_complex(cls, values: Sequence[complex]) -> "ComplexSequence":
        arr = np.asarray(values, dtype=COMPLEX_DTYPE)
        return cls(real=arr.real, imag=arr.imag)

    def to_complex(self) -> np.ndarray:
        return self.real + 1j * self.imag


def is_power_of_two(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


def validate_length(n: int) -> None:
    """Raises InvalidLengthError unless n is 0 or a power of two."""
    if n != 0 and not is_power_of_two(n):
        raise InvalidLengthError(n)


def transform(seq: ComplexSequence) -> ComplexSequence:
    """
    Discrete Fourier Transform of a ComplexSequence.
    The length is checked once here; the recursion below trusts it.
    """
    validate_length(len(seq))
    result = recursive_fft(seq.to_complex())
    return ComplexSequence(real=result.real, imag=result.imag)


def fft_wrapper(input_data: Sequence[complex]) -> np.ndarray:
    """
    Wraps the recursive FFT implementation for a single array of
    complex (or real) samples. The input is copied, never modified.
    """
    complex_array = np.array(input_data, dtype=COMPLEX_DTYPE)
    if complex_array.ndim != 1:
        raise FFTError(f"Expected a 1-D sequence, got shape {complex_array.shape}.")
    validate_length(len(complex_array))
    return recursive_fft(complex_array)


def fft_pair(real: Sequence[float], imag: Sequence[float]) -> Tuple[np.ndarray, np.ndarray]:
    """Transforms separate real/imaginary arrays and returns them the same way."""
    result = transform(ComplexSequence(real=real, imag=imag))
    return result.real, result.imag


def twiddle_factors(n: int) -> np.ndarray:
    """e^{-2*pi*i*k/n} for k in 0..n/2-1."""
    angle = -2 * np.pi * np.arange(n // 2) / n
    return np.cos(angle) + 1j * np.sin(angle)


def recursive_fft(x: np.ndarray) -> np.ndarray:
    """
    Computes the Fast Fourier Transform (FFT) recursively.
    len(x) must be 0 or a power of two.
    """
    n = len(x)
    if n <= 1:
        return x.copy()

    even = recursive_fft(x[0::2].copy())
    odd = recursive_fft(x[1::2].copy())

    # Twiddle-adjusted odd terms for this block size
    t = twiddle_factors(n) * odd

    combined = np.zeros(n, dtype=COMPLEX_DTYPE)
    combined[:n // 2] = even + t
    combined[n // 2:] = even - t

    return combined
