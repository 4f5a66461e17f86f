"""
Filter/map composition for deriving new GPX aggregates from existing ones
"""

__all__ = ['TransformBuilder']

from typing import Callable, Generic, List, Sequence, Tuple, TypeVar

from typing_extensions import Self


PARENT = TypeVar('PARENT')
CHILD = TypeVar('CHILD')


class TransformBuilder(Generic[PARENT, CHILD]):
    """
    Derives a new aggregate from `source` by filtering and mapping its children.
    The source is never modified.

    Registered maps are applied to each child first, in registration order; the
    mapped children are then kept only if they satisfy every registered filter.
    The relative order of the children is always preserved.

    A builder may only be built once. Calling `build()` again, or registering
    further filters or maps afterwards, raises a RuntimeError.

    Args:
        source:
            The aggregate being transformed

        children:
            The children of `source` to be transformed. Held by reference, not copied.

        rebuild:
            Creates the new aggregate from `source` and the transformed children,
            carrying over every other field of `source`

    Examples:
        ```python
        # Drop every waypoint without a timestamp and shift elevations by 10 meters
        new_segment = (
            segment.transform()
            .filter(lambda wp: wp.time is not None)
            .map(lambda wp: wp.to_builder().elevation((wp.elevation or 0.) + 10).build())
            .build()
        )
        ```
    """

    def __init__(
        self,
        source: PARENT,
        children: Sequence[CHILD],
        rebuild: Callable[[PARENT, Tuple[CHILD, ...]], PARENT],
    ):
        self._source = source
        self._children = children
        self._rebuild = rebuild
        self._filters: List[Callable[[CHILD], bool]] = []
        self._mappers: List[Callable[[CHILD], CHILD]] = []
        self._built = False

    def __repr__(self):
        return (
            f'<TransformBuilder for {type(self._source).__name__} with '
            f'{len(self._filters)} filters, {len(self._mappers)} maps>'
        )

    def _ensure_not_built(self):
        if self._built:
            raise RuntimeError('TransformBuilder has already been built and cannot be reused.')

    def filter(self, predicate: Callable[[CHILD], bool]) -> Self:
        """
        Keep only children satisfying `predicate`. Multiple filters must all be
        satisfied for a child to be kept.

        Args:
            predicate:
                A function accepting a child and returning a bool

        Returns:
            This builder
        """
        self._ensure_not_built()
        if not callable(predicate):
            raise ValueError(f'Filter predicate must be callable; got {predicate!r}')

        self._filters.append(predicate)
        return self

    def map(self, function: Callable[[CHILD], CHILD]) -> Self:
        """
        Replace each child with the result of `function`. Multiple maps are
        chained in the order they were registered. `function` must not return None.

        Args:
            function:
                A function accepting a child and returning its replacement

        Returns:
            This builder
        """
        self._ensure_not_built()
        if not callable(function):
            raise ValueError(f'Map function must be callable; got {function!r}')

        self._mappers.append(function)
        return self

    def build(self) -> PARENT:
        """
        Apply the registered maps and filters and create the new aggregate.

        Returns:
            A new aggregate of the same type as the source
        """
        self._ensure_not_built()
        self._built = True

        children = []
        for child in self._children:
            for mapper in self._mappers:
                child = mapper(child)
                if child is None:
                    raise ValueError(
                        'Map function returned None; map functions must return a '
                        'replacement value (use filter() to drop values).'
                    )

            if all(predicate(child) for predicate in self._filters):
                children.append(child)

        return self._rebuild(self._source, tuple(children))
