"""Unit tests for random sources."""

import random

import pytest

from fire_dynamics.exceptions import InvalidConfiguration
from fire_dynamics.random_source import RandomSource, SequenceRandomSource


class TestSequenceRandomSource:
    """Test cases for the replaying source."""

    def test_replays_and_cycles(self):
        source = SequenceRandomSource([0.1, 0.5])
        assert [source.random() for _ in range(5)] == [0.1, 0.5, 0.1, 0.5, 0.1]
        assert source.draws == 5

    def test_rejects_empty_sequence(self):
        with pytest.raises(InvalidConfiguration):
            SequenceRandomSource([])

    @pytest.mark.parametrize("value", [1.0, -0.01, 2])
    def test_rejects_values_outside_unit_interval(self, value):
        with pytest.raises(InvalidConfiguration):
            SequenceRandomSource([0.2, value])


class TestRandomSourceProtocol:
    """Anything with a random() method can drive the grid."""

    def test_sequence_source_matches_protocol(self):
        assert isinstance(SequenceRandomSource([0.3]), RandomSource)

    def test_stdlib_generator_matches_protocol(self):
        assert isinstance(random.Random(1), RandomSource)
