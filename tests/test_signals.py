import pytest
import numpy as np

from fft import transform
from signals import SIGNALS, cosine, make_signal, ones, ramp, unit_impulse


class TestSignals:

    def test_impulse(self):
        seq = unit_impulse(4)
        np.testing.assert_array_equal(seq.real, [1, 0, 0, 0])
        np.testing.assert_array_equal(seq.imag, [0, 0, 0, 0])

    def test_empty_impulse(self):
        assert len(unit_impulse(0)) == 0

    def test_empty_cosine(self):
        assert len(cosine(0)) == 0

    def test_ones(self):
        np.testing.assert_array_equal(ones(8).real, np.ones(8))

    def test_ramp(self):
        np.testing.assert_array_equal(ramp(4).real, [0, 1, 2, 3])

    def test_cosine_spectrum(self):
        """A single-cycle cosine has energy n/2 in bins 1 and n-1."""
        n = 16
        result = transform(cosine(n)).to_complex()
        expected = np.zeros(n)
        expected[1] = expected[n - 1] = n / 2
        np.testing.assert_allclose(result, expected, atol=1e-9)

    @pytest.mark.parametrize("name", sorted(SIGNALS))
    def test_make_signal(self, name):
        assert len(make_signal(name, 8)) == 8

    def test_unknown_signal(self):
        with pytest.raises(ValueError, match="Unknown signal"):
            make_signal("square", 4)

    def test_negative_length(self):
        with pytest.raises(ValueError):
            make_signal("ones", -1)
