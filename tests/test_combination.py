from sizedseq import MISSING, SizedSequence


def test_filter_map_keeps_present_values() -> None:
    parsed = SizedSequence(["1", "x", "3"]).filter_map(
        lambda value: int(value) if value.isdigit() else MISSING
    )

    assert len(parsed) == 2
    assert parsed.to_list() == [1, 3]


def test_filter_map_keeps_none_results() -> None:
    mapped = SizedSequence([1, 2]).filter_map(lambda value: None)

    assert len(mapped) == 2
    assert mapped.to_list() == [None, None]


def test_append_sums_lengths(one_to_five: SizedSequence[int]) -> None:
    appended = one_to_five.append(SizedSequence([6, 7]))

    assert len(appended) == 7
    assert appended.to_list() == [1, 2, 3, 4, 5, 6, 7]


def test_append_empty_returns_other(one_to_five: SizedSequence[int]) -> None:
    assert one_to_five.append(SizedSequence.empty()) is one_to_five
    assert SizedSequence.empty().append(one_to_five) is one_to_five


def test_add_operator_appends() -> None:
    appended = SizedSequence([1]) + SizedSequence([2, 3])

    assert len(appended) == 3
    assert appended.to_list() == [1, 2, 3]


def test_concat_joins_all_sequences() -> None:
    joined = SizedSequence.concat(
        [
            SizedSequence([1, 2]),
            SizedSequence.empty(),
            SizedSequence([3]),
        ]
    )

    assert len(joined) == 3
    assert joined.to_list() == [1, 2, 3]


def test_concat_of_nothing_is_empty() -> None:
    joined = SizedSequence.concat([])

    assert len(joined) == 0
    assert joined.to_list() == []


def test_concat_map_flattens_results() -> None:
    expanded = SizedSequence([1, 2, 3]).concat_map(lambda value: SizedSequence.repeat(value, value))

    assert len(expanded) == 6
    assert expanded.to_list() == [1, 2, 2, 3, 3, 3]
