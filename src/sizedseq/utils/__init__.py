from sizedseq.utils.collections import as_tuple
from sizedseq.utils.env import getenv_bool
from sizedseq.utils.logs import setup_logging

__all__ = (
    "as_tuple",
    "getenv_bool",
    "setup_logging",
)
