from collections.abc import Generator

import pytest

from sizedseq import SizedSequence
from sizedseq.types import sequence


@pytest.fixture(autouse=True)
def verify_counts(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """
    Ensure every sequence built during tests is checked against its cached count.
    """
    monkeypatch.setattr(sequence, "VERIFY_COUNTS", True)
    yield


@pytest.fixture
def one_to_five() -> SizedSequence[int]:
    return SizedSequence.range(1, 5)
