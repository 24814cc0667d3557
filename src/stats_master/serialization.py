"""
Serialized form of generation results.

The persisted representation is a tree of pydantic models tagged with a
``type`` field. Integer keys of frequency mappings are stored as strings and
decoded back to integers; the cumulative table is omitted unless present.
Loading rebuilds the immutable domain objects, so every parameter constraint
and the frequency-sum invariant are re-checked.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from stats_master.errors import InvalidParameterError, UnsupportedDistributionError
from stats_master.families import (
    BinomialParameters,
    DistributionParameters,
    NormalParameters,
    UniformParameters,
)
from stats_master.sampling.results import (
    BinomialValueInfo,
    GeneratedValue,
    GenerationResult,
    Interval,
    IntervalData,
    NormalValueInfo,
    UniformValueInfo,
    ValueInfo,
)

# =============================================================================
# Parameters
# =============================================================================


class BinomialParametersModel(BaseModel):
    """Binomial distribution parameters."""

    type: Literal["binomial"] = "binomial"
    n: int
    p: float


class UniformParametersModel(BaseModel):
    """Uniform distribution parameters."""

    type: Literal["uniform"] = "uniform"
    a: float
    b: float


class NormalParametersModel(BaseModel):
    """Normal distribution parameters."""

    type: Literal["normal"] = "normal"
    m: float
    sigma: float


ParametersModel = Annotated[
    BinomialParametersModel | UniformParametersModel | NormalParametersModel,
    Field(discriminator="type"),
]

# =============================================================================
# Generated values
# =============================================================================


class BinomialValueInfoModel(BaseModel):
    type: Literal["binomial"] = "binomial"
    cumulative_index: int


class UniformValueInfoModel(BaseModel):
    type: Literal["uniform"] = "uniform"
    a: float
    b: float
    interval_index: int
    calculation: str


class NormalValueInfoModel(BaseModel):
    type: Literal["normal"] = "normal"
    m: float
    sigma: float
    standard_value: float
    interval_index: int


ValueInfoModel = Annotated[
    BinomialValueInfoModel | UniformValueInfoModel | NormalValueInfoModel,
    Field(discriminator="type"),
]


class GeneratedValueModel(BaseModel):
    """One generated value with the draws that produced it."""

    value: int | float
    random_draws: list[float]
    info: ValueInfoModel


# =============================================================================
# Interval data and results
# =============================================================================


class IntervalModel(BaseModel):
    index: int
    start: float
    end: float
    frequency: int = Field(ge=0)


class IntervalDataModel(BaseModel):
    """Variation series; frequency keys are decimal strings."""

    intervals: list[IntervalModel] = Field(default_factory=list)
    frequency_dict: dict[str, int]
    cumulative_probabilities: list[float] | None = None
    number_of_intervals: int
    interval_width: float


class GenerationResultModel(BaseModel):
    """One generated batch."""

    parameters: ParametersModel
    sample_size: int = Field(ge=0)
    values: list[GeneratedValueModel]
    interval_data: IntervalDataModel | None = None


_parameters_adapter: TypeAdapter[Any] = TypeAdapter(ParametersModel)

# =============================================================================
# Conversion
# =============================================================================


def parameters_to_model(
    parameters: DistributionParameters,
) -> BinomialParametersModel | UniformParametersModel | NormalParametersModel:
    """
    Serializable model of distribution parameters.

    Raises
    ------
    UnsupportedDistributionError
        If ``parameters`` belong to no supported family.
    """
    match parameters:
        case BinomialParameters():
            return BinomialParametersModel(n=parameters.n, p=parameters.p)
        case UniformParameters():
            return UniformParametersModel(a=parameters.a, b=parameters.b)
        case NormalParameters():
            return NormalParametersModel(m=parameters.m, sigma=parameters.sigma)
        case _:
            raise UnsupportedDistributionError(parameters, "Serialization")


def model_to_parameters(
    model: BinomialParametersModel | UniformParametersModel | NormalParametersModel,
) -> DistributionParameters:
    """Rebuild validated distribution parameters from their model."""
    match model:
        case BinomialParametersModel():
            return BinomialParameters(n=model.n, p=model.p)
        case UniformParametersModel():
            return UniformParameters(a=model.a, b=model.b)
        case NormalParametersModel():
            return NormalParameters(m=model.m, sigma=model.sigma)


def _info_to_model(info: ValueInfo) -> Any:
    match info:
        case BinomialValueInfo():
            return BinomialValueInfoModel(cumulative_index=info.cumulative_index)
        case UniformValueInfo():
            return UniformValueInfoModel(
                a=info.a,
                b=info.b,
                interval_index=info.interval_index,
                calculation=info.calculation,
            )
        case NormalValueInfo():
            return NormalValueInfoModel(
                m=info.m,
                sigma=info.sigma,
                standard_value=info.standard_value,
                interval_index=info.interval_index,
            )
        case _:
            raise TypeError(f"Unknown value provenance record {info!r}")


def _model_to_info(model: Any) -> ValueInfo:
    match model:
        case BinomialValueInfoModel():
            return BinomialValueInfo(cumulative_index=model.cumulative_index)
        case UniformValueInfoModel():
            return UniformValueInfo(
                a=model.a,
                b=model.b,
                interval_index=model.interval_index,
                calculation=model.calculation,
            )
        case NormalValueInfoModel():
            return NormalValueInfo(
                m=model.m,
                sigma=model.sigma,
                standard_value=model.standard_value,
                interval_index=model.interval_index,
            )
        case _:
            raise TypeError(f"Unknown value provenance model {model!r}")


def interval_data_to_model(data: IntervalData) -> IntervalDataModel:
    """Serializable model of a variation series."""
    return IntervalDataModel(
        intervals=[
            IntervalModel(index=i.index, start=i.start, end=i.end, frequency=i.frequency)
            for i in data.intervals
        ],
        frequency_dict={str(key): freq for key, freq in data.frequency_dict.items()},
        cumulative_probabilities=(
            list(data.cumulative_probabilities)
            if data.cumulative_probabilities is not None
            else None
        ),
        number_of_intervals=data.number_of_intervals,
        interval_width=data.interval_width,
    )


def model_to_interval_data(model: IntervalDataModel) -> IntervalData:
    """Rebuild a variation series; frequency keys are decoded to integers."""
    try:
        frequencies = {int(key): freq for key, freq in model.frequency_dict.items()}
    except ValueError as e:
        raise InvalidParameterError(f"Frequency keys must be integers: {e}") from e
    return IntervalData(
        intervals=tuple(
            Interval(index=i.index, start=i.start, end=i.end, frequency=i.frequency)
            for i in model.intervals
        ),
        frequency_dict=frequencies,
        cumulative_probabilities=(
            tuple(model.cumulative_probabilities)
            if model.cumulative_probabilities is not None
            else None
        ),
        number_of_intervals=model.number_of_intervals,
        interval_width=model.interval_width,
    )


def generation_result_to_model(result: GenerationResult) -> GenerationResultModel:
    """Serializable model of a generated batch."""
    return GenerationResultModel(
        parameters=parameters_to_model(result.parameters),
        sample_size=result.sample_size,
        values=[
            GeneratedValueModel(
                value=v.value,
                random_draws=list(v.random_draws),
                info=_info_to_model(v.info),
            )
            for v in result.values
        ],
        interval_data=(
            interval_data_to_model(result.interval_data)
            if result.interval_data is not None
            else None
        ),
    )


def model_to_generation_result(model: GenerationResultModel) -> GenerationResult:
    """Rebuild a generated batch, re-checking all of its invariants."""
    return GenerationResult(
        values=tuple(
            GeneratedValue(
                value=v.value,
                random_draws=tuple(v.random_draws),
                info=_model_to_info(v.info),
            )
            for v in model.values
        ),
        parameters=model_to_parameters(model.parameters),
        sample_size=model.sample_size,
        interval_data=(
            model_to_interval_data(model.interval_data)
            if model.interval_data is not None
            else None
        ),
    )


# =============================================================================
# Public API
# =============================================================================


def dump_parameters(parameters: DistributionParameters) -> dict[str, Any]:
    """JSON-compatible dict of distribution parameters, tagged with ``type``."""
    return parameters_to_model(parameters).model_dump(mode="json")


def load_parameters(data: dict[str, Any]) -> DistributionParameters:
    """
    Distribution parameters from their dict form.

    Raises
    ------
    InvalidParameterError
        If the payload is malformed or violates a parameter constraint.
    """
    try:
        model = _parameters_adapter.validate_python(data)
    except ValidationError as e:
        raise InvalidParameterError(f"Malformed parameters: {e}") from e
    return model_to_parameters(model)


def dump_generation_result(result: GenerationResult) -> dict[str, Any]:
    """
    JSON-compatible dict of a generated batch.

    Absent fields (the cumulative table of continuous samples, missing
    interval data) are omitted.
    """
    return generation_result_to_model(result).model_dump(mode="json", exclude_none=True)


def load_generation_result(data: dict[str, Any]) -> GenerationResult:
    """
    Generated batch from its dict form.

    Raises
    ------
    InvalidParameterError
        If the payload is malformed or breaks an invariant of the result.
    """
    try:
        model = GenerationResultModel.model_validate(data)
    except ValidationError as e:
        raise InvalidParameterError(f"Malformed generation result: {e}") from e
    return model_to_generation_result(model)


def generation_result_to_json(result: GenerationResult, indent: int | None = None) -> str:
    """JSON text of a generated batch."""
    return generation_result_to_model(result).model_dump_json(indent=indent, exclude_none=True)


def generation_result_from_json(text: str | bytes) -> GenerationResult:
    """
    Generated batch from JSON text.

    Raises
    ------
    InvalidParameterError
        If the text is not valid JSON of a generated batch.
    """
    try:
        model = GenerationResultModel.model_validate_json(text)
    except ValidationError as e:
        raise InvalidParameterError(f"Malformed generation result: {e}") from e
    return model_to_generation_result(model)


__all__ = [
    "BinomialParametersModel",
    "UniformParametersModel",
    "NormalParametersModel",
    "ParametersModel",
    "BinomialValueInfoModel",
    "UniformValueInfoModel",
    "NormalValueInfoModel",
    "GeneratedValueModel",
    "IntervalModel",
    "IntervalDataModel",
    "GenerationResultModel",
    "parameters_to_model",
    "model_to_parameters",
    "interval_data_to_model",
    "model_to_interval_data",
    "generation_result_to_model",
    "model_to_generation_result",
    "dump_parameters",
    "load_parameters",
    "dump_generation_result",
    "load_generation_result",
    "generation_result_to_json",
    "generation_result_from_json",
]
