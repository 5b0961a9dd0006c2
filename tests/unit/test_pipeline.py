"""Unit tests for context assembly and rendering."""

from pathlib import Path

import pytest

from quire.config import DataKeyCollisionPolicy, RenderOptions
from quire.exceptions import (
    ConfigValidationError,
    DataKeyCollisionError,
    InvalidSortOrderError,
    TemplateExecutionError,
)
from quire.pipeline import build_super_data, render
from tests.conftest import CapturedLogger, WriteFile


@pytest.fixture
def site(tmp_path: Path, write_file: WriteFile) -> Path:
    """Global data, two data files and a root template below tmp_path."""
    _ = write_file("global/site.json", '{"site": "demo"}')
    _ = write_file("data/a.json", '{"title": "A"}')
    _ = write_file("data/b.yaml", "title: B\n")
    _ = write_file(
        "page.tmpl",
        "{{ site }}: {% for item in items %}{{ item.title }} {% endfor %}",
    )
    return tmp_path


class TestBuildSuperData:
    def test_assembles_context(self, site: Path) -> None:
        options = RenderOptions(
            global_data=[str(site / "global" / "site.json")],
            data=[str(site / "data" / "*")],
            data_key="items",
        )

        result = build_super_data(options)

        assert result.context == {
            "site": "demo",
            "items": [{"title": "A"}, {"title": "B"}],
        }
        assert result.conflicts == ()
        assert result.diagnostics == ()

    def test_orders_data_descending(self, site: Path) -> None:
        options = RenderOptions(data=[str(site / "data")], sort_data="filename-desc")

        result = build_super_data(options)

        assert result.context["data"] == [{"title": "B"}, {"title": "A"}]

    def test_first_global_file_wins_and_conflict_is_logged(
        self, site: Path, write_file: WriteFile, captured_logger: CapturedLogger
    ) -> None:
        other = write_file("global/other.toml", 'site = "other"\n')
        options = RenderOptions(
            global_data=[str(site / "global" / "site.json"), str(other)]
        )

        result = build_super_data(options, logger=captured_logger.logger)

        assert result.context["site"] == "demo"
        assert result.conflicts == ("site",)
        assert "merge conflict for global data key" in captured_logger.text

    def test_bad_files_become_diagnostics(
        self, site: Path, write_file: WriteFile
    ) -> None:
        bad = write_file("data/c.json", "{nope")
        options = RenderOptions(data=[str(site / "data")])

        result = build_super_data(options)

        assert len(result.context["data"]) == 2
        assert [d.path for d in result.diagnostics] == [bad]

    def test_data_key_collision_raises(self, write_file: WriteFile) -> None:
        glob_file = write_file("g.json", '{"data": "taken"}')

        with pytest.raises(DataKeyCollisionError):
            _ = build_super_data(RenderOptions(global_data=[str(glob_file)]))

    def test_data_key_collision_overwrite(self, write_file: WriteFile) -> None:
        glob_file = write_file("g.json", '{"data": "taken"}')
        options = RenderOptions(
            global_data=[str(glob_file)],
            on_data_key_collision=DataKeyCollisionPolicy.OVERWRITE,
        )

        result = build_super_data(options)

        assert result.context == {"data": []}

    def test_strict_sort_order(self, site: Path) -> None:
        options = RenderOptions(
            data=[str(site / "data")], sort_data="size", strict_sort_order=True
        )

        with pytest.raises(InvalidSortOrderError):
            _ = build_super_data(options)


class TestRender:
    def test_end_to_end(self, site: Path) -> None:
        options = RenderOptions(
            root=site / "page.tmpl",
            global_data=[str(site / "global")],
            data=[str(site / "data")],
            data_key="items",
        )

        result = render(options)

        assert result.output == "demo: A B "
        assert result.context["site"] == "demo"

    def test_requires_root(self) -> None:
        with pytest.raises(ConfigValidationError) as exc_info:
            _ = render(RenderOptions())

        assert exc_info.value.key == "root"

    def test_includes_template_diagnostics(
        self, site: Path, write_file: WriteFile
    ) -> None:
        stray = write_file("partials/stray.mst", "{{x}}")
        options = RenderOptions(
            root=site / "page.tmpl",
            partials=[stray],
            global_data=[str(site / "global")],
            data=[str(site / "data")],
            data_key="items",
        )

        result = render(options)

        assert [d.path for d in result.diagnostics] == [stray]

    def test_strict_undefined(self, write_file: WriteFile) -> None:
        root = write_file("page.tmpl", "{{ missing }}")

        with pytest.raises(TemplateExecutionError):
            _ = render(RenderOptions(root=root, strict_undefined=True))
