"""
Unit tests for uniform deviate sources.
"""

import pytest

from mc_gaussian.rng.uniform import PseudoUniformGenerator, SequenceUniformSource, UniformSource


class TestPseudoUniformGenerator:
    """Test suite for PseudoUniformGenerator."""

    def test_satisfies_protocol(self):
        """Test that the generator is a UniformSource."""
        assert isinstance(PseudoUniformGenerator(0), UniformSource)

    def test_reproducibility(self):
        """Test that same seed produces same sequences."""
        gen1 = PseudoUniformGenerator(seed=42)
        gen2 = PseudoUniformGenerator(seed=42)

        assert [gen1.next() for _ in range(100)] == [gen2.next() for _ in range(100)]

    def test_range(self):
        """Test that all values are in the open interval (0, 1)."""
        gen = PseudoUniformGenerator(seed=3)
        values = [gen.next() for _ in range(10000)]

        assert all(0.0 < u < 1.0 for u in values)

    def test_weight(self):
        """Test that weight is 0.0 before drawing and 1.0 afterwards."""
        gen = PseudoUniformGenerator(seed=3)
        assert gen.weight() == 0.0

        gen.next()
        assert gen.weight() == 1.0

    def test_returns_float(self):
        """Test that draws are plain floats."""
        assert isinstance(PseudoUniformGenerator(seed=1).next(), float)


class TestSequenceUniformSource:
    """Test suite for SequenceUniformSource."""

    def test_replay(self):
        """Test that values and weights are replayed in order."""
        source = SequenceUniformSource([0.1, 0.2, 0.3], [1.0, 2.0, 3.0])

        for u, w in [(0.1, 1.0), (0.2, 2.0), (0.3, 3.0)]:
            assert source.next() == u
            assert source.weight() == w

    def test_default_weights(self):
        """Test that weights default to 1.0."""
        source = SequenceUniformSource([0.25, 0.75])
        assert source.weights == [1.0, 1.0]

    def test_weight_before_first_draw(self):
        """Test that weight is 0.0 before drawing."""
        source = SequenceUniformSource([0.25], [5.0])
        assert source.weight() == 0.0

    def test_remaining(self):
        """Test that remaining counts unconsumed values."""
        source = SequenceUniformSource([0.1, 0.2])
        assert source.remaining == 2
        source.next()
        assert source.remaining == 1

    def test_exhausted(self):
        """Test that reading past the end raises IndexError."""
        source = SequenceUniformSource([0.5])
        source.next()

        with pytest.raises(IndexError, match="uniform sequence exhausted"):
            source.next()

    def test_length_mismatch(self):
        """Test that mismatched lengths raise ValueError."""
        with pytest.raises(ValueError, match="values and weights must have the same length"):
            SequenceUniformSource([0.1, 0.2], [1.0])

    def test_factory_ignores_seed(self):
        """Test that the factory builds identical fresh sources for any seed."""
        make = SequenceUniformSource.factory([0.1, 0.9], [2.0, 3.0])
        source1 = make(1)
        source2 = make(99)

        assert source1 is not source2
        assert [source1.next(), source1.next()] == [source2.next(), source2.next()]
        assert source1.weight() == source2.weight() == 3.0


class TestSourceDocumentation:
    """Test that the source methods are documented."""

    @pytest.mark.parametrize("cls", [PseudoUniformGenerator, SequenceUniformSource])
    def test_next_and_weight_docstrings(self, cls):
        """Test that next() and weight() carry docstrings."""
        assert cls.next.__doc__
        assert cls.weight.__doc__
