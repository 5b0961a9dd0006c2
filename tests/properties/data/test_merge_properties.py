"""Property-based tests for data merging."""

from hypothesis import given, strategies as st

from quire.data import assemble_super_data, merge_data

keys = st.text(min_size=1, max_size=8)
values = st.one_of(st.integers(), st.text(max_size=8), st.booleans(), st.none())
containers = st.lists(st.dictionaries(keys, values, max_size=6), max_size=6)


@given(containers=containers)
def test_merged_keys_are_union_of_inputs(containers: list[dict[str, object]]) -> None:
    merged, _ = merge_data(*containers)

    assert set(merged) == {key for container in containers for key in container}


@given(containers=containers)
def test_first_container_defining_a_key_wins(
    containers: list[dict[str, object]],
) -> None:
    merged, _ = merge_data(*containers)

    for key, value in merged.items():
        first = next(c for c in containers if key in c)
        assert value == first[key]


@given(containers=containers)
def test_conflicts_are_exactly_keys_seen_twice(
    containers: list[dict[str, object]],
) -> None:
    _, conflicts = merge_data(*containers)

    expected = {
        key
        for key in {k for c in containers for k in c}
        if sum(key in c for c in containers) > 1
    }
    assert set(conflicts) == expected
    assert len(conflicts) == len(set(conflicts))


@given(containers=containers)
def test_merge_is_idempotent_on_its_result(
    containers: list[dict[str, object]],
) -> None:
    merged, _ = merge_data(*containers)

    again, conflicts = merge_data(merged, *containers)

    assert again == merged
    assert set(conflicts) == set(merged)


@given(
    data=st.lists(st.dictionaries(keys, values, max_size=3), max_size=5),
    global_data=st.dictionaries(keys.filter(lambda k: k != "data"), values, max_size=5),
)
def test_super_data_has_globals_plus_data_list(
    data: list[dict[str, object]], global_data: dict[str, object]
) -> None:
    super_data, _ = assemble_super_data("data", data, global_data)

    assert super_data["data"] == data
    assert {k: v for k, v in super_data.items() if k != "data"} == global_data
