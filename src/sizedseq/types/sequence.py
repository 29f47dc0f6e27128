"""Immutable sequence caching its own length."""

from collections.abc import Callable, Iterable, Iterator
from functools import cmp_to_key, reduce
from itertools import chain, islice
from logging import Logger, getLogger
from math import prod
from typing import Any, Final, NoReturn, Protocol, Self, final, overload

from sizedseq.types.missing import MISSING, Missing
from sizedseq.utils.collections import as_tuple
from sizedseq.utils.env import getenv_bool

__all__ = (
    "VERIFY_COUNTS",
    "CountMismatchError",
    "SizedSequence",
)

VERIFY_COUNTS: bool = getenv_bool("SIZEDSEQ_VERIFY_COUNTS", __debug__)

logger: Final[Logger] = getLogger("sizedseq")


class CountMismatchError(Exception):
    """
    Raised when a cached count differs from the actual number of elements.

    Only reported while count verification is enabled
    (``SIZEDSEQ_VERIFY_COUNTS`` environment switch).
    """

    def __init__(
        self,
        *,
        expected: int,
        actual: int,
    ) -> None:
        super().__init__(f"Cached count {expected} does not match {actual} elements")
        self.expected: int = expected
        self.actual: int = actual


class _Orderable(Protocol):
    def __lt__(
        self,
        other: Any,
        /,
    ) -> bool: ...


class _Addable(Protocol):
    def __add__(
        self,
        other: Any,
        /,
    ) -> Any: ...


class _Multipliable(Protocol):
    def __mul__(
        self,
        other: Any,
        /,
    ) -> Any: ...


@final
class SizedSequence[Element]:
    """
    An immutable ordered sequence which caches its own length.

    Every operation returns a new instance (or the same one when nothing
    changes) with the count adjusted from the counts of its inputs, so
    reading the length never walks the elements. Partial queries return
    ``MISSING`` instead of raising.

    Examples
    --------
    ```python
    numbers = SizedSequence.range(1, 5)
    assert len(numbers.take(2)) == 2
    assert numbers.get_at(10) is MISSING
    ```
    """

    __slots__ = (
        "_elements",
        "_length",
    )

    def __init__(
        self,
        elements: Iterable[Element] = (),
        /,
    ) -> None:
        adopted: tuple[Element, ...] = as_tuple(elements)
        object.__setattr__(
            self,
            "_elements",
            adopted,
        )
        object.__setattr__(
            self,
            "_length",
            len(adopted),
        )

    # construction

    @classmethod
    def empty(cls) -> "SizedSequence[Any]":
        return _EMPTY

    @classmethod
    def of[Value](
        cls,
        element: Value,
        /,
    ) -> "SizedSequence[Value]":
        return _sized((element,), 1)

    @classmethod
    def repeat[Value](
        cls,
        count: int,
        element: Value,
        /,
    ) -> "SizedSequence[Value]":
        """
        Prepare a sequence holding ``count`` copies of the element.

        Negative counts produce an empty sequence.
        """
        length: int = max(count, 0)
        return _sized((element,) * length, length)

    @classmethod
    def range(
        cls,
        start: int,
        end: int,
        /,
    ) -> "SizedSequence[int]":
        """
        Prepare a sequence of integers from ``start`` to ``end``, both inclusive.

        An ``end`` lower than ``start`` produces an empty sequence.
        """
        length: int = max(end - start + 1, 0)
        return _sized(tuple(range(start, start + length)), length)

    @classmethod
    def from_sequence[Value](
        cls,
        elements: Iterable[Value],
        /,
    ) -> "SizedSequence[Value]":
        return SizedSequence(elements)

    @classmethod
    def concat[Value](
        cls,
        sequences: Iterable["SizedSequence[Value]"],
        /,
    ) -> "SizedSequence[Value]":
        """
        Join all sequences in order, the result of appending them one by one.

        The resulting count is the sum of the cached counts of all parts.
        """
        parts: tuple[SizedSequence[Value], ...] = as_tuple(sequences)
        return _sized(
            tuple(chain.from_iterable(part._elements for part in parts)),
            sum(part._length for part in parts),
        )

    def cons(
        self,
        element: Element,
        /,
    ) -> Self:
        """Prepend the element, copying all current elements into a new tuple (O(n))."""
        return _sized((element, *self._elements), self._length + 1)

    # transformation

    def map[Mapped](
        self,
        function: Callable[[Element], Mapped],
        /,
    ) -> "SizedSequence[Mapped]":
        return _sized(tuple(map(function, self._elements)), self._length)

    def indexed_map[Mapped](
        self,
        function: Callable[[int, Element], Mapped],
        /,
    ) -> "SizedSequence[Mapped]":
        """Map elements along with their zero-based position."""
        return _sized(
            tuple(function(index, element) for index, element in enumerate(self._elements)),
            self._length,
        )

    def map2[Second, Mapped](
        self,
        function: Callable[[Element, Second], Mapped],
        other: "SizedSequence[Second]",
        /,
    ) -> "SizedSequence[Mapped]":
        """
        Combine elements pairwise, stopping at the end of the shorter sequence.

        Parameters
        ----------
        function : Callable[[Element, Second], Mapped]
            Combination of elements at the same position.
        other : SizedSequence[Second]
            Sequence providing second arguments.

        Returns
        -------
        SizedSequence[Mapped]
            Combined elements, as many as the shorter input holds.
        """
        return _sized(
            tuple(map(function, self._elements, other._elements)),
            min(self._length, other._length),
        )

    def map3[Second, Third, Mapped](
        self,
        function: Callable[[Element, Second, Third], Mapped],
        second: "SizedSequence[Second]",
        third: "SizedSequence[Third]",
        /,
    ) -> "SizedSequence[Mapped]":
        return _sized(
            tuple(map(function, self._elements, second._elements, third._elements)),
            min(self._length, second._length, third._length),
        )

    def map4[Second, Third, Fourth, Mapped](
        self,
        function: Callable[[Element, Second, Third, Fourth], Mapped],
        second: "SizedSequence[Second]",
        third: "SizedSequence[Third]",
        fourth: "SizedSequence[Fourth]",
        /,
    ) -> "SizedSequence[Mapped]":
        return _sized(
            tuple(
                map(
                    function,
                    self._elements,
                    second._elements,
                    third._elements,
                    fourth._elements,
                )
            ),
            min(self._length, second._length, third._length, fourth._length),
        )

    def map5[Second, Third, Fourth, Fifth, Mapped](  # noqa: PLR0913
        self,
        function: Callable[[Element, Second, Third, Fourth, Fifth], Mapped],
        second: "SizedSequence[Second]",
        third: "SizedSequence[Third]",
        fourth: "SizedSequence[Fourth]",
        fifth: "SizedSequence[Fifth]",
        /,
    ) -> "SizedSequence[Mapped]":
        return _sized(
            tuple(
                map(
                    function,
                    self._elements,
                    second._elements,
                    third._elements,
                    fourth._elements,
                    fifth._elements,
                )
            ),
            min(
                self._length,
                second._length,
                third._length,
                fourth._length,
                fifth._length,
            ),
        )

    def zip[Second](
        self,
        other: "SizedSequence[Second]",
        /,
    ) -> "SizedSequence[tuple[Element, Second]]":
        return _sized(
            tuple(zip(self._elements, other._elements)),
            min(self._length, other._length),
        )

    def foldl[Accumulator](
        self,
        function: Callable[[Element, Accumulator], Accumulator],
        initial: Accumulator,
        /,
    ) -> Accumulator:
        """
        Reduce elements starting from the first one.

        The function receives an element and the current accumulator.
        """
        return reduce(
            lambda accumulator, element: function(element, accumulator),
            self._elements,
            initial,
        )

    def foldr[Accumulator](
        self,
        function: Callable[[Element, Accumulator], Accumulator],
        initial: Accumulator,
        /,
    ) -> Accumulator:
        """
        Reduce elements starting from the last one.

        The function receives an element and the current accumulator.
        """
        return reduce(
            lambda accumulator, element: function(element, accumulator),
            reversed(self._elements),
            initial,
        )

    def sort[Value: _Orderable](
        self: "SizedSequence[Value]",
    ) -> "SizedSequence[Value]":
        return _sized(tuple(sorted(self._elements)), self._length)

    def sort_by[Key: _Orderable](
        self,
        key: Callable[[Element], Key],
        /,
    ) -> Self:
        return _sized(tuple(sorted(self._elements, key=key)), self._length)

    def sort_with(
        self,
        comparator: Callable[[Element, Element], int],
        /,
    ) -> Self:
        """
        Sort using a comparator returning a negative, zero or positive number.

        Sorting is stable, elements compared as equal keep their order.
        """
        return _sized(
            tuple(sorted(self._elements, key=cmp_to_key(comparator))),
            self._length,
        )

    def reverse(self) -> Self:
        return _sized(self._elements[::-1], self._length)

    def intersperse(
        self,
        separator: Element,
        /,
    ) -> Self:
        """Place the separator between each pair of adjacent elements."""
        if self._length < 2:  # noqa: PLR2004
            return self

        return _sized(
            tuple(
                islice(
                    chain.from_iterable((separator, element) for element in self._elements),
                    1,
                    None,
                )
            ),
            self._length * 2 - 1,
        )

    # filtering

    def filter(
        self,
        predicate: Callable[[Element], bool],
        /,
    ) -> Self:
        kept: tuple[Element, ...] = tuple(
            element for element in self._elements if predicate(element)
        )
        return _sized(kept, len(kept))

    def filter_map[Mapped](
        self,
        function: Callable[[Element], Mapped | Missing],
        /,
    ) -> "SizedSequence[Mapped]":
        """
        Map elements and keep only results which are not MISSING.

        Returning MISSING from the function drops the element, None is kept
        as a regular value.
        """
        kept: tuple[Mapped, ...] = tuple(
            mapped  # pyright: ignore[reportAssignmentType]
            for mapped in map(function, self._elements)
            if mapped is not MISSING
        )
        return _sized(kept, len(kept))

    # combination

    def append(
        self,
        other: "SizedSequence[Element]",
        /,
    ) -> Self:
        if not other._length:
            return self

        elif not self._length:
            return other  # pyright: ignore[reportReturnType]

        return _sized(self._elements + other._elements, self._length + other._length)

    def concat_map[Mapped](
        self,
        function: Callable[[Element], "SizedSequence[Mapped]"],
        /,
    ) -> "SizedSequence[Mapped]":
        return SizedSequence.concat(map(function, self._elements))

    # deconstruction

    def is_empty(self) -> bool:
        return self._length == 0

    def head(self) -> Element | Missing:
        if self._length:
            return self._elements[0]

        else:
            return MISSING

    def tail(self) -> Self | Missing:
        if self._length:
            return _sized(self._elements[1:], self._length - 1)

        else:
            return MISSING

    def uncons(self) -> tuple[Element, Self] | Missing:
        """
        Split the sequence into its first element and the remaining ones.

        Returns
        -------
        tuple[Element, Self] | Missing
            The first element with the rest of the sequence,
            MISSING when the sequence is empty.
        """
        if self._length:
            return (
                self._elements[0],
                _sized(self._elements[1:], self._length - 1),
            )

        else:
            return MISSING

    def take(
        self,
        count: int,
        /,
    ) -> Self:
        length: int = min(self._length, max(count, 0))
        if length == self._length:
            return self

        return _sized(self._elements[:length], length)

    def drop(
        self,
        count: int,
        /,
    ) -> Self:
        skipped: int = max(count, 0)
        if not skipped:
            return self

        return _sized(self._elements[skipped:], max(self._length - skipped, 0))

    def partition(
        self,
        predicate: Callable[[Element], bool],
        /,
    ) -> tuple[Self, Self]:
        """
        Split elements into those satisfying the predicate and the rest.

        The predicate is evaluated once for each element, the count of
        rejected elements is derived from the counts of the whole and
        of the kept part.

        Returns
        -------
        tuple[Self, Self]
            Kept and rejected elements, both in their original order.
        """
        kept: list[Element] = []
        rejected: list[Element] = []
        for element in self._elements:
            if predicate(element):
                kept.append(element)

            else:
                rejected.append(element)

        kept_length: int = len(kept)
        return (
            _sized(tuple(kept), kept_length),
            _sized(tuple(rejected), self._length - kept_length),
        )

    def unzip[First, Second](
        self: "SizedSequence[tuple[First, Second]]",
    ) -> tuple["SizedSequence[First]", "SizedSequence[Second]"]:
        return (
            _sized(tuple(first for first, _ in self._elements), self._length),
            _sized(tuple(second for _, second in self._elements), self._length),
        )

    # utilities

    @property
    def length(self) -> int:
        return self._length

    def all(
        self,
        predicate: Callable[[Element], bool],
        /,
    ) -> bool:
        return all(predicate(element) for element in self._elements)

    def any(
        self,
        predicate: Callable[[Element], bool],
        /,
    ) -> bool:
        return any(predicate(element) for element in self._elements)

    def minimum[Value: _Orderable](
        self: "SizedSequence[Value]",
    ) -> Value | Missing:
        if self._length:
            return min(self._elements)

        else:
            return MISSING

    def maximum[Value: _Orderable](
        self: "SizedSequence[Value]",
    ) -> Value | Missing:
        if self._length:
            return max(self._elements)

        else:
            return MISSING

    def sum[Value: _Addable](
        self: "SizedSequence[Value]",
    ) -> Value | int:
        return sum(self._elements, 0)

    def product[Value: _Multipliable](
        self: "SizedSequence[Value]",
    ) -> Value | int:
        return prod(self._elements)

    def member(
        self,
        element: Any,
        /,
    ) -> bool:
        return element in self._elements

    def get_at(
        self,
        index: int,
        /,
    ) -> Element | Missing:
        """
        Access an element by its zero-based position.

        Negative positions are out of range, unlike regular Python indexing.
        """
        if 0 <= index < self._length:
            return self._elements[index]

        else:
            return MISSING

    def update_at(
        self,
        index: int,
        function: Callable[[Element], Element],
        /,
    ) -> Self:
        """
        Replace the element at the position with the function result.

        Returns the same sequence when the position is out of range.
        """
        if not 0 <= index < self._length:
            return self

        return _sized(
            (
                *self._elements[:index],
                function(self._elements[index]),
                *self._elements[index + 1 :],
            ),
            self._length,
        )

    def remove_at(
        self,
        index: int,
        /,
    ) -> Self:
        """
        Remove the element at the position.

        Returns the same sequence when the position is out of range.
        """
        if not 0 <= index < self._length:
            return self

        return _sized(
            self._elements[:index] + self._elements[index + 1 :],
            self._length - 1,
        )

    def to_list(self) -> list[Element]:
        return list(self._elements)

    def to_tuple(self) -> tuple[Element, ...]:
        return self._elements

    # sequence protocol

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Element]:
        return iter(self._elements)

    def __reversed__(self) -> Iterator[Element]:
        return reversed(self._elements)

    def __contains__(
        self,
        element: Any,
    ) -> bool:
        return element in self._elements

    @overload
    def __getitem__(
        self,
        index: int,
    ) -> Element: ...

    @overload
    def __getitem__(
        self,
        index: slice,
    ) -> Self: ...

    def __getitem__(
        self,
        index: int | slice,
    ) -> Element | Self:
        match index:
            case slice():
                elements: tuple[Element, ...] = self._elements[index]
                return _sized(elements, len(elements))

            case _:
                return self._elements[index]

    def __add__(
        self,
        other: Any,
    ) -> Self:
        if not isinstance(other, SizedSequence):
            return NotImplemented

        return self.append(other)  # pyright: ignore[reportUnknownArgumentType]

    def __eq__(
        self,
        other: object,
    ) -> bool:
        if not isinstance(other, SizedSequence):
            return NotImplemented

        return (
            self._length == other._length  # pyright: ignore[reportUnknownMemberType]
            and self._elements == other._elements  # pyright: ignore[reportUnknownMemberType]
        )

    def __hash__(self) -> int:
        return hash((self.__class__, self._elements))

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({list(self._elements)!r})"

    def __repr__(self) -> str:
        return str(self)

    # immutability

    def __setattr__(
        self,
        name: str,
        value: Any,
    ) -> NoReturn:
        raise AttributeError(
            f"Can't modify immutable {self.__class__.__qualname__},"
            f" attribute - '{name}' cannot be modified"
        )

    def __delattr__(
        self,
        name: str,
    ) -> NoReturn:
        raise AttributeError(
            f"Can't modify immutable {self.__class__.__qualname__},"
            f" attribute - '{name}' cannot be deleted"
        )

    def __copy__(self) -> Self:
        return self  # SizedSequence is immutable, no need to provide an actual copy

    def __deepcopy__(
        self,
        memo: dict[int, Any] | None,
    ) -> Self:
        return self  # SizedSequence is immutable, no need to provide an actual copy


def _sized[Value](
    elements: tuple[Value, ...],
    length: int,
    /,
) -> Any:
    # builds a sequence trusting the provided count, checked only when verification is enabled
    if VERIFY_COUNTS and length != len(elements):
        logger.error(
            "SizedSequence count invariant violated: cached %d, actual %d",
            length,
            len(elements),
        )
        raise CountMismatchError(
            expected=length,
            actual=len(elements),
        )

    sequence: SizedSequence[Value] = object.__new__(SizedSequence)
    object.__setattr__(
        sequence,
        "_elements",
        elements,
    )
    object.__setattr__(
        sequence,
        "_length",
        length,
    )
    return sequence


_EMPTY: Final[SizedSequence[Any]] = SizedSequence()
