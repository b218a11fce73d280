import sys
import numpy as np
import matplotlib.pyplot as plt
from typing import List, Optional

from fft import ComplexSequence, FFTError, transform
from signals import SIGNALS, make_signal

DEFAULT_SIGNAL = "impulse"
DEFAULT_LENGTH = 4
DISPLAY_DECIMALS = 2

USAGE = f"Usage: fft-demo [{'|'.join(SIGNALS)}] [length] [--plot]"


def format_result(result: ComplexSequence) -> List[str]:
    """One line per frequency bin, rounded for display."""
    # + 0.0 maps -0.0 to 0.0
    real = np.round(result.real, DISPLAY_DECIMALS) + 0.0
    imag = np.round(result.imag, DISPLAY_DECIMALS) + 0.0

    lines = ["FFT Result:"]
    for i in range(len(result)):
        lines.append(
            f"Index {i}: Real = {real[i]:.{DISPLAY_DECIMALS}f}, "
            f"Imaginary = {imag[i]:.{DISPLAY_DECIMALS}f}"
        )
    return lines


def plot_spectrum(signal: ComplexSequence, result: ComplexSequence, signal_name: str):
    fig, axes = plt.subplots(2, 1, figsize=(10, 7))
    plt.subplots_adjust(hspace=0.4)
    indices = np.arange(len(signal))

    axes[0].stem(indices, signal.real, linefmt='C0-', markerfmt='C0o', basefmt='k-', label='Real')
    axes[0].stem(indices, signal.imag, linefmt='C3--', markerfmt='C3x', basefmt='k-', label='Imag')
    axes[0].set_title(f"Input Signal ({signal_name}, N={len(signal)})")
    axes[0].set_xlabel("Sample index")
    axes[0].legend()
    axes[0].grid(True, alpha=0.3)

    magnitude = np.abs(result.to_complex())
    axes[1].bar(indices, magnitude, color='#1f77b4')
    axes[1].set_title("Magnitude Spectrum")
    axes[1].set_xlabel("Frequency bin")
    axes[1].set_ylabel("|X[k]|")
    axes[1].grid(True, linestyle='--', alpha=0.4)

    plt.show()


def run_demo(signal_name: str = DEFAULT_SIGNAL, length: int = DEFAULT_LENGTH, plot: bool = False) -> ComplexSequence:
    """Builds a sample signal, transforms it and prints every bin."""
    signal = make_signal(signal_name, length)
    result = transform(signal)

    for line in format_result(result):
        print(line)

    if plot:
        plot_spectrum(signal, result, signal_name)
    return result


def main(argv: Optional[List[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)

    plot = "--plot" in args
    args = [a for a in args if a != "--plot"]

    if "-h" in args or "--help" in args:
        print(USAGE)
        return 0
    if len(args) > 2:
        print(USAGE)
        return 1

    signal_name = args[0] if len(args) > 0 else DEFAULT_SIGNAL
    try:
        length = int(args[1]) if len(args) > 1 else DEFAULT_LENGTH
    except ValueError:
        print(f"Error: length must be an integer, got '{args[1]}'.")
        return 1

    try:
        run_demo(signal_name, length, plot=plot)
    except FFTError as e:
        print(f"Error: {e}")
        return 1
    except ValueError as e:
        print(f"Error: {e}")
        print(USAGE)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
