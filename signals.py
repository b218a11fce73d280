import numpy as np
from typing import Callable, Dict

from fft import ComplexSequence


def unit_impulse(n: int) -> ComplexSequence:
    """1 at index 0, 0 elsewhere. Its transform is constant 1."""
    real = np.zeros(n)
    if n > 0:
        real[0] = 1.0
    return ComplexSequence(real=real, imag=np.zeros(n))


def ones(n: int) -> ComplexSequence:
    """All-ones (DC) signal. Its transform is n at bin 0."""
    return ComplexSequence(real=np.ones(n), imag=np.zeros(n))


def cosine(n: int, cycles: int = 1) -> ComplexSequence:
    # Energy lands in bins `cycles` and n - `cycles`
    real = np.cos(2 * np.pi * cycles * np.arange(n) / n)
    return ComplexSequence(real=real, imag=np.zeros(n))


def ramp(n: int) -> ComplexSequence:
    return ComplexSequence(real=np.arange(n, dtype=float), imag=np.zeros(n))


SIGNALS: Dict[str, Callable[[int], ComplexSequence]] = {
    "impulse": unit_impulse,
    "ones": ones,
    "cosine": cosine,
    "ramp": ramp,
}


def make_signal(name: str, n: int) -> ComplexSequence:
    if name not in SIGNALS:
        raise ValueError(f"Unknown signal '{name}'. Choose from: {', '.join(SIGNALS)}.")
    if n < 0:
        raise ValueError(f"Signal length must be non-negative, got {n}.")
    return SIGNALS[name](n)
