"""
Base class declarations for gpxstructures
"""

from __future__ import annotations

from abc import ABC
from typing import Any, ClassVar, Dict, Generic, Tuple, Type, TypeVar

from typing_extensions import Self

from gpxstructures.utils.mixins import ImmutableMixin


ENTITY_VAR = TypeVar('ENTITY_VAR', bound='EntityBase')


class EntityBase(ImmutableMixin, ABC):
    """
    An immutable GPX value. Subclasses declare the names of their fields in
    `_FIELDS`; equality, hashing and copying are all defined over them.
    """

    _FIELDS: ClassVar[Tuple[str, ...]] = ()

    def __eq__(self, other):
        if type(self) is not type(other):
            return False

        return self._values() == other._values()

    def __hash__(self):
        return hash((type(self).__name__, self._values()))

    def _as_dict(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in self._FIELDS}

    def _values(self) -> Tuple:
        return tuple(getattr(self, name) for name in self._FIELDS)

    def _replace(self, **changes) -> Self:
        """Creates a copy of this value with the given fields replaced"""
        values = self._as_dict()
        values.update(changes)
        return type(self)(**values)


class BuilderBase(Generic[ENTITY_VAR]):
    """
    Mutable staging area for an entity. The builder may be used to build any
    number of values; each build takes a snapshot of the staged fields.
    """

    _ENTITY: ClassVar[Type]

    def __init__(self, **values):
        self._values: Dict[str, Any] = dict(values)

    def __repr__(self):
        return f'<{type(self).__name__} for {self._ENTITY.__name__}>'

    def _set(self, name: str, value: Any) -> Self:
        self._values[name] = value
        return self

    def _append(self, name: str, value: Any) -> Self:
        self._values[name] = [*self._values.get(name, ()), value]
        return self

    def build(self) -> ENTITY_VAR:
        """Freezes the staged fields into a new value"""
        return self._ENTITY(**self._values)
