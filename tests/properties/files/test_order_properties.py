"""Property-based tests for file ordering."""

from pathlib import Path

from hypothesis import given, strategies as st

from quire.files import sort_loaded, sort_paths

names = st.text(
    alphabet=st.characters(categories=["L", "Nd"]), min_size=1, max_size=10
)
path_lists = st.lists(
    st.builds(lambda d, n: Path(d) / f"{n}.json", st.sampled_from(["a", "b", "c"]), names),
    unique=True,
    max_size=12,
)


@given(paths=path_lists)
def test_descending_is_reverse_of_ascending(paths: list[Path]) -> None:
    ascending = sort_paths(paths, "filename")
    descending = sort_paths(paths, "filename-desc")

    assert descending == list(reversed(ascending))


@given(paths=path_lists)
def test_sort_is_a_permutation(paths: list[Path]) -> None:
    result = sort_paths(paths, "filename")

    assert sorted(result) == sorted(paths)


@given(paths=path_lists)
def test_sort_ignores_input_order(paths: list[Path]) -> None:
    assert sort_paths(paths, "filename") == sort_paths(list(reversed(paths)), "filename")


@given(paths=path_lists)
def test_base_names_are_non_decreasing(paths: list[Path]) -> None:
    result = sort_paths(paths, "filename")

    names_in_order = [path.name for path in result]
    assert names_in_order == sorted(names_in_order)


@given(paths=path_lists)
def test_sort_loaded_matches_sort_paths(paths: list[Path]) -> None:
    files = {path: {"path": str(path)} for path in paths}

    result = sort_loaded(files, "filename-desc")

    assert [item["path"] for item in result] == [
        str(path) for path in sort_paths(paths, "filename-desc")
    ]
