"""
Family Parameters
=================

Declarative parameter classes for the supported families.

A parameter class is a plain class body turned into a frozen slotted
dataclass by :func:`parametrization`. Methods marked with :func:`constraint`
are gathered at decoration time and evaluated in ``__post_init__``, so a
constructed instance is always valid for its family.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import dataclass, fields, is_dataclass
from functools import wraps
from inspect import isfunction
from typing import TYPE_CHECKING, ParamSpec, TypeVar

from stats_master.errors import InvalidParameterError

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from stats_master.types import FamilyName, Kind

_CONSTRAINT_MARK = "__stats_master_constraint__"

P = ParamSpec("P")
T = TypeVar("T", bound="type[Parametrization]")


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Named predicate over a parameter instance.

    Attributes
    ----------
    description : str
        Text used in the error raised when the predicate fails.
    check : Callable[[Any], bool]
        Unbound method evaluated against the instance.
    """

    description: str
    check: Callable[[Any], bool]

    def enforce(self, params: Parametrization) -> None:
        try:
            satisfied = self.check(params)
        except TypeError as exc:
            raise InvalidParameterError(
                f'Constraint "{self.description}" cannot be checked: {exc}'
            ) from exc
        if not satisfied:
            raise InvalidParameterError(
                f'Constraint "{self.description}" does not hold for {params!r}'
            )


class Parametrization(ABC):
    """Base of every family parameter class."""

    __family__: ClassVar[FamilyName]
    __kind__: ClassVar[Kind]
    _constraints: ClassVar[tuple[ParametrizationConstraint, ...]] = ()

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """
        Run every declared constraint in declaration order.

        Raises
        ------
        InvalidParameterError
            On the first constraint that fails or cannot be evaluated.
        """
        for rule in type(self)._constraints:
            rule.enforce(self)

    @property
    def family(self) -> FamilyName:
        return type(self).__family__

    @property
    def kind(self) -> Kind:
        return type(self).__kind__

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        return list(type(self)._constraints)

    @property
    def parameters(self) -> dict[str, Any]:
        """Field values keyed by field name."""
        return {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]


def constraint(description: str) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Mark an instance method as a validity rule of its parameter class.

    Parameters
    ----------
    description : str
        Short statement of the rule, e.g. ``"0 <= p <= 1"``.
    """

    def mark(method: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(method)
        def predicate(*args: P.args, **kwargs: P.kwargs) -> bool:
            return bool(method(*args, **kwargs))

        setattr(predicate, _CONSTRAINT_MARK, description)
        return predicate

    return mark


def _gather_constraints(cls: type) -> tuple[ParametrizationConstraint, ...]:
    found: list[ParametrizationConstraint] = []
    for name, member in vars(cls).items():
        # parameter classes hold only fields and instance predicates
        if isinstance(member, (staticmethod, classmethod)):
            kind = type(member).__name__
            raise TypeError(f"@constraint '{name}' must be an instance method, not @{kind}")
        if isfunction(member) and hasattr(member, _CONSTRAINT_MARK):
            found.append(
                ParametrizationConstraint(
                    description=getattr(member, _CONSTRAINT_MARK), check=member
                )
            )
    return tuple(found)


def parametrization(*, family: FamilyName, kind: Kind) -> Callable[[T], T]:
    """
    Register a class as the parameters of ``family``.

    Parameters
    ----------
    family : FamilyName
        Family the class describes.
    kind : Kind
        Whether outcomes of the family are discrete or continuous.

    Returns
    -------
    Callable[[T], T]
        Class decorator producing a frozen slotted dataclass with the
        family metadata and the collected constraints attached.
    """

    def register(cls: T) -> T:
        rules = _gather_constraints(cls)
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)
        cls.__family__ = family
        cls.__kind__ = kind
        cls._constraints = rules
        return cls

    return register


__all__ = [
    "Parametrization",
    "ParametrizationConstraint",
    "constraint",
    "parametrization",
]
