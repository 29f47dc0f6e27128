from sizedseq.types import (
    MISSING,
    CountMismatchError,
    Missing,
    SizedSequence,
    is_missing,
    not_missing,
    unwrap_missing,
)

__all__ = (
    "MISSING",
    "CountMismatchError",
    "Missing",
    "SizedSequence",
    "is_missing",
    "not_missing",
    "unwrap_missing",
)
