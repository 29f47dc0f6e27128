from collections.abc import Iterable

__all__ = ("as_tuple",)


def as_tuple[T](
    collection: Iterable[T],
    /,
) -> tuple[T, ...]:
    """
    Converts any given Iterable into a tuple.

    Parameters
    ----------
    collection : Iterable[T]
        The input collection to be converted to a tuple.

    Returns
    -------
    tuple[T, ...]
        A new tuple containing all elements of the input collection,
        or the original tuple if it was already one.
    """

    if isinstance(collection, tuple):
        return collection  # pyright: ignore[reportUnknownVariableType]

    else:
        return tuple(collection)
