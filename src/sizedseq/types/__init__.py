from sizedseq.types.missing import MISSING, Missing, is_missing, not_missing, unwrap_missing
from sizedseq.types.sequence import CountMismatchError, SizedSequence

__all__ = (
    "MISSING",
    "CountMismatchError",
    "Missing",
    "SizedSequence",
    "is_missing",
    "not_missing",
    "unwrap_missing",
)
