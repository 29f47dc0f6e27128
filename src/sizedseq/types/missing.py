from collections.abc import Callable
from typing import Any, Final, TypeGuard, cast, final, overload

__all__ = (
    "MISSING",
    "Missing",
    "is_missing",
    "not_missing",
    "unwrap_missing",
)


class MissingType(type):
    """
    Metaclass keeping a single instance of the Missing class.

    Identity comparison with the 'is' operator is the supported way
    of checking for an absent result.
    """

    _instance: Any = None

    def __call__(cls) -> Any:
        if cls._instance is None:
            cls._instance = super().__call__()

        return cls._instance


@final
class Missing(metaclass=MissingType):
    """
    Absent result of a partial sequence query. Use MISSING constant for its value.

    Queries such as ``head``, ``get_at`` or ``minimum`` return MISSING when
    there is nothing to return. Unlike None it can't be confused with an
    element, so a sequence may hold None values and still report absence
    without ambiguity.
    """

    __slots__ = ()
    __match_args__ = ()

    def __bool__(self) -> bool:
        return False

    def __hash__(self) -> int:
        return hash(self.__class__)

    def __eq__(
        self,
        value: object,
    ) -> bool:
        return value is MISSING

    def __str__(self) -> str:
        return "MISSING"

    def __repr__(self) -> str:
        return "MISSING"

    def __setattr__(
        self,
        name: str,
        value: Any,
    ) -> None:
        raise AttributeError("Missing can't be modified")

    def __delattr__(
        self,
        name: str,
    ) -> None:
        raise AttributeError("Missing can't be modified")


MISSING: Final[Missing] = Missing()


def is_missing(
    check: Any | Missing,
    /,
) -> TypeGuard[Missing]:
    """
    Check if a query result is absent.

    Parameters
    ----------
    check : Any | Missing
        The value to check

    Returns
    -------
    TypeGuard[Missing]
        True if the value is MISSING, False otherwise

    Examples
    --------
    ```python
    if is_missing(sequence.head()):
        handle_empty()
    ```
    """
    return check is MISSING


def not_missing[Value](
    check: Value | Missing,
    /,
) -> TypeGuard[Value]:
    """
    Check if a query result holds a value.

    Parameters
    ----------
    check : Value | Missing
        The value to check

    Returns
    -------
    TypeGuard[Value]
        True if the value is not MISSING, False otherwise
    """
    return check is not MISSING


@overload
def unwrap_missing[Value](
    value: Value | Missing,
    /,
    *,
    default: Value,
) -> Value: ...


@overload
def unwrap_missing[Value, Mapped](
    value: Value | Missing,
    /,
    *,
    default: Mapped,
    mapping: Callable[[Value], Mapped],
) -> Value | Mapped: ...


def unwrap_missing[Value, Mapped](
    value: Value | Missing,
    /,
    *,
    default: Value | Mapped,
    mapping: Callable[[Value], Mapped] | None = None,
) -> Value | Mapped:
    """
    Replace an absent query result with a default, optionally mapping a present one.

    Parameters
    ----------
    value : Value | Missing
        The query result.
    default : Value | Mapped
        The value to use if the result is MISSING.
    mapping : Callable[[Value], Mapped] | None
        Mapping applied to a present value.

    Returns
    -------
    Value | Mapped
        The (mapped) value if present, otherwise the provided default.

    Examples
    --------
    ```python
    first = unwrap_missing(sequence.head(), default=0)
    ```
    """
    if value is MISSING:
        return default

    elif mapping is not None:
        return mapping(cast(Value, value))

    else:
        return cast(Value, value)
