import pytest

from sizedseq.utils import getenv_bool


@pytest.mark.parametrize("value", ["true", "TRUE", "1", "t"])
def test_getenv_bool_true_values(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("SIZEDSEQ_TEST_SWITCH", value)

    assert getenv_bool("SIZEDSEQ_TEST_SWITCH") is True


def test_getenv_bool_false_value(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SIZEDSEQ_TEST_SWITCH", "no")

    assert getenv_bool("SIZEDSEQ_TEST_SWITCH", True) is False


def test_getenv_bool_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SIZEDSEQ_TEST_SWITCH", raising=False)

    assert getenv_bool("SIZEDSEQ_TEST_SWITCH") is None
    assert getenv_bool("SIZEDSEQ_TEST_SWITCH", True) is True


def test_getenv_bool_required(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SIZEDSEQ_TEST_SWITCH", raising=False)

    with pytest.raises(ValueError):
        getenv_bool("SIZEDSEQ_TEST_SWITCH", required=True)
