__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from stats_master.errors import InvalidParameterError
from stats_master.families import UniformParameters
from stats_master.sampling import (
    GeneratedValue,
    GenerationResult,
    Interval,
    IntervalData,
    NormalValueInfo,
    UniformValueInfo,
)
from tests.utils.mocks import make_result


def two_intervals(first: int = 1, second: int = 2) -> IntervalData:
    return IntervalData(
        intervals=(
            Interval(index=0, start=0.0, end=0.5, frequency=first),
            Interval(index=1, start=0.5, end=1.0, frequency=second),
        ),
        frequency_dict={0: first, 1: second},
        cumulative_probabilities=None,
        number_of_intervals=2,
        interval_width=0.5,
    )


def uniform_value(x: float, index: int) -> GeneratedValue:
    return GeneratedValue(
        value=x,
        random_draws=(x,),
        info=UniformValueInfo(a=0.0, b=1.0, interval_index=index, calculation=""),
    )


class TestIntervalData:
    def test_valid_series(self):
        data = two_intervals()

        assert data.total_frequency == 3
        assert data.relative_frequencies() == pytest.approx({0: 1 / 3, 1: 2 / 3})
        assert [i.index for i in data] == [0, 1]
        assert data.intervals[1].relative_frequency(3) == pytest.approx(2 / 3)

    def test_frequency_dict_is_read_only(self):
        data = two_intervals()
        with pytest.raises(TypeError):
            data.frequency_dict[0] = 5  # type: ignore[index]

    def test_gap_between_intervals_raises(self):
        with pytest.raises(InvalidParameterError, match="does not start"):
            IntervalData(
                intervals=(
                    Interval(index=0, start=0.0, end=0.4, frequency=0),
                    Interval(index=1, start=0.5, end=1.0, frequency=0),
                ),
                frequency_dict={0: 0, 1: 0},
                cumulative_probabilities=None,
                number_of_intervals=2,
                interval_width=0.5,
            )

    def test_unordered_intervals_raise(self):
        with pytest.raises(InvalidParameterError, match="has index"):
            IntervalData(
                intervals=(
                    Interval(index=1, start=0.0, end=0.5, frequency=0),
                    Interval(index=0, start=0.5, end=1.0, frequency=0),
                ),
                frequency_dict={0: 0, 1: 0},
                cumulative_probabilities=None,
                number_of_intervals=2,
                interval_width=0.5,
            )

    def test_disagreeing_frequencies_raise(self):
        with pytest.raises(InvalidParameterError, match="disagrees"):
            IntervalData(
                intervals=(Interval(index=0, start=0.0, end=1.0, frequency=2),),
                frequency_dict={0: 3},
                cumulative_probabilities=None,
                number_of_intervals=1,
                interval_width=1.0,
            )

    def test_negative_frequency_raises(self):
        with pytest.raises(InvalidParameterError, match="non-negative"):
            IntervalData(
                intervals=(),
                frequency_dict={0: -1},
                cumulative_probabilities=None,
                number_of_intervals=1,
                interval_width=1.0,
            )

    def test_relative_frequencies_of_empty_series_raise(self):
        data = IntervalData(
            intervals=(),
            frequency_dict={},
            cumulative_probabilities=None,
            number_of_intervals=0,
            interval_width=1.0,
        )
        with pytest.raises(InvalidParameterError):
            data.relative_frequencies()


class TestGenerationResult:
    def test_properties(self):
        values = (uniform_value(0.25, 0), uniform_value(0.75, 1), uniform_value(0.8, 1))
        result = GenerationResult(
            values=values,
            parameters=UniformParameters(a=0.0, b=1.0),
            sample_size=3,
            interval_data=two_intervals(),
        )

        assert len(result) == 3
        assert result.sample.tolist() == [0.25, 0.75, 0.8]
        assert dict(result.frequency_dict) == {0: 1, 1: 2}
        assert result.cumulative_probabilities is None
        assert result.values[0].random_u == 0.25

    def test_random_u_is_absent_for_combined_draws(self):
        value = GeneratedValue(
            value=1.0,
            random_draws=(0.5,) * 12,
            info=NormalValueInfo(m=1.0, sigma=1.0, standard_value=0.0, interval_index=6),
        )
        assert value.random_u is None

    def test_frequency_dict_without_interval_data_counts_values(self):
        result = make_result([1, 2, 2, 3])

        assert dict(result.frequency_dict) == {1: 1, 2: 2, 3: 1}

    def test_frequency_dict_without_interval_data_rejects_fractions(self):
        result = GenerationResult(
            values=(uniform_value(0.25, 0), uniform_value(0.75, 1)),
            parameters=UniformParameters(a=0.0, b=1.0),
            sample_size=2,
        )

        with pytest.raises(InvalidParameterError, match="interval data"):
            result.frequency_dict

    def test_length_mismatch_raises(self):
        with pytest.raises(InvalidParameterError, match="Expected 2 generated values"):
            GenerationResult(
                values=(uniform_value(0.1, 0),),
                parameters=UniformParameters(a=0.0, b=1.0),
                sample_size=2,
            )

    def test_frequency_sum_mismatch_raises(self):
        with pytest.raises(InvalidParameterError, match="Frequencies sum to 3"):
            GenerationResult(
                values=(uniform_value(0.1, 0), uniform_value(0.9, 1)),
                parameters=UniformParameters(a=0.0, b=1.0),
                sample_size=2,
                interval_data=two_intervals(),
            )
