"""
Tests for the dict and JSON forms of parameters and generated batches.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import json

import pytest

from stats_master.errors import InvalidParameterError, UnsupportedDistributionError
from stats_master.families import BinomialParameters, NormalParameters, UniformParameters
from stats_master.sampling import NumpyRandomSource, generate
from stats_master.serialization import (
    GeneratedValueModel,
    dump_generation_result,
    dump_parameters,
    generation_result_from_json,
    generation_result_to_json,
    generation_result_to_model,
    load_generation_result,
    load_parameters,
    model_to_generation_result,
)
from tests.utils.mocks import make_result

PARAMETERS = [
    BinomialParameters(n=6, p=0.25),
    UniformParameters(a=-1.5, b=2.5),
    NormalParameters(m=3.0, sigma=0.75),
]


class TestParameters:
    def test_tagged_dict_form(self):
        assert dump_parameters(BinomialParameters(n=6, p=0.25)) == {
            "type": "binomial",
            "n": 6,
            "p": 0.25,
        }
        assert dump_parameters(UniformParameters(a=0.0, b=1.0)) == {
            "type": "uniform",
            "a": 0.0,
            "b": 1.0,
        }
        assert dump_parameters(NormalParameters(m=0.0, sigma=2.0)) == {
            "type": "normal",
            "m": 0.0,
            "sigma": 2.0,
        }

    @pytest.mark.parametrize("params", PARAMETERS)
    def test_round_trip(self, params):
        assert load_parameters(dump_parameters(params)) == params

    @pytest.mark.parametrize(
        "payload",
        [
            {"type": "binomial", "n": 10, "p": 1.5},
            {"type": "uniform", "a": 3.0, "b": 1.0},
            {"type": "normal", "m": 0.0, "sigma": -1.0},
            {"type": "normal", "m": 0.0},
            {"type": "gamma", "k": 2.0},
            {"n": 10, "p": 0.5},
            {"type": "binomial", "n": "ten", "p": 0.5},
        ],
    )
    def test_invalid_payload_raises(self, payload):
        with pytest.raises(InvalidParameterError):
            load_parameters(payload)

    def test_unknown_parameters_raise(self):
        with pytest.raises(UnsupportedDistributionError):
            dump_parameters(object())  # type: ignore[arg-type]


class TestGenerationResult:
    @pytest.mark.parametrize("params", PARAMETERS)
    def test_dict_round_trip(self, params):
        result = generate(params, 40, NumpyRandomSource(21))

        assert load_generation_result(dump_generation_result(result)) == result

    @pytest.mark.parametrize("params", PARAMETERS)
    def test_json_round_trip(self, params):
        result = generate(params, 25, NumpyRandomSource(13))

        text = generation_result_to_json(result, indent=2)

        assert generation_result_from_json(text) == result

    def test_frequency_keys_are_strings(self):
        result = generate(UniformParameters(a=0.0, b=1.0), 10, NumpyRandomSource(3))

        data = dump_generation_result(result)

        assert list(data["interval_data"]["frequency_dict"]) == [str(i) for i in range(10)]
        assert sum(data["interval_data"]["frequency_dict"].values()) == 10

    def test_cumulative_table_only_for_binomial(self):
        binomial = dump_generation_result(generate(PARAMETERS[0], 5, NumpyRandomSource(1)))
        normal = dump_generation_result(generate(PARAMETERS[2], 5, NumpyRandomSource(1)))

        assert len(binomial["interval_data"]["cumulative_probabilities"]) == 7
        assert binomial["interval_data"]["intervals"] == []
        assert "cumulative_probabilities" not in normal["interval_data"]
        assert len(normal["interval_data"]["intervals"]) == 13

    def test_value_records_are_tagged(self):
        data = dump_generation_result(generate(PARAMETERS[2], 2, NumpyRandomSource(5)))
        record = data["values"][0]

        assert data["parameters"]["type"] == "normal"
        assert record["info"]["type"] == "normal"
        assert len(record["random_draws"]) == 12
        assert set(record["info"]) == {"type", "m", "sigma", "standard_value", "interval_index"}

    def test_result_without_interval_data(self):
        result = make_result([2, 5, 5])

        data = dump_generation_result(result)

        assert "interval_data" not in data
        assert load_generation_result(data) == result

    def test_json_is_plain_json(self):
        result = generate(PARAMETERS[1], 3, NumpyRandomSource(8))

        payload = json.loads(generation_result_to_json(result))

        assert payload["sample_size"] == 3
        assert payload["values"][0]["info"]["calculation"].startswith("x = -1.5 + ")

    def test_tampered_frequencies_raise(self):
        data = dump_generation_result(generate(PARAMETERS[1], 20, NumpyRandomSource(2)))
        data["interval_data"]["frequency_dict"]["0"] += 1

        with pytest.raises(InvalidParameterError):
            load_generation_result(data)

    def test_non_integer_frequency_key_raises(self):
        data = dump_generation_result(generate(PARAMETERS[0], 4, NumpyRandomSource(2)))
        data["interval_data"]["frequency_dict"]["x"] = 0

        with pytest.raises(InvalidParameterError, match="integers"):
            load_generation_result(data)

    def test_missing_field_raises(self):
        data = dump_generation_result(generate(PARAMETERS[2], 4, NumpyRandomSource(2)))
        del data["values"][0]["info"]["standard_value"]

        with pytest.raises(InvalidParameterError, match="Malformed"):
            load_generation_result(data)

    def test_sample_size_mismatch_raises(self):
        data = dump_generation_result(generate(PARAMETERS[2], 4, NumpyRandomSource(2)))
        data["sample_size"] = 5

        with pytest.raises(InvalidParameterError):
            load_generation_result(data)

    def test_invalid_json_raises(self):
        with pytest.raises(InvalidParameterError):
            generation_result_from_json("{not json")

    def test_unknown_value_record_model_raises(self):
        model = generation_result_to_model(generate(PARAMETERS[2], 1, NumpyRandomSource(4)))
        model.values[0] = GeneratedValueModel.model_construct(
            value=0.0, random_draws=[], info=object()
        )

        with pytest.raises(TypeError, match="Unknown value provenance model"):
            model_to_generation_result(model)
