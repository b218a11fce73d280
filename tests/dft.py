import numpy as np
from typing import Sequence

from fft import COMPLEX_DTYPE


def dft(x: Sequence[complex]) -> np.ndarray:
    """
    Direct O(N^2) Discrete Fourier Transform.
    Works for any length; used to check the recursive transform.
    """
    samples = np.asarray(x, dtype=COMPLEX_DTYPE)
    n = len(samples)
    result = np.zeros(n, dtype=COMPLEX_DTYPE)
    for k in range(n):
        angle = -2 * np.pi * k * np.arange(n) / n
        result[k] = np.sum(samples * (np.cos(angle) + 1j * np.sin(angle)))
    return result
