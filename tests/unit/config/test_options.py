# pyright: reportAny=false
"""Unit tests for render options and option resolution."""

from pathlib import Path

import pytest
import tomli_w
from pydantic import ValidationError

from quire.config import (
    DEFAULT_CONFIG,
    DataKeyCollisionPolicy,
    LogFormat,
    LogLevel,
    RenderOptions,
    resolve_options,
)
from quire.exceptions import ConfigLoadError, ConfigValidationError


class TestRenderOptions:
    def test_defaults(self) -> None:
        options = RenderOptions()

        assert options.root is None
        assert options.partials == []
        assert options.data_key == "data"
        assert options.sort_data == "filename"
        assert options.on_data_key_collision is DataKeyCollisionPolicy.ERROR
        assert options.strict_sort_order is False
        assert options.logging.level is None
        assert options.logging.format is LogFormat.TEXT

    def test_empty_data_key_becomes_default(self) -> None:
        assert RenderOptions(data_key="").data_key == "data"

    def test_empty_sort_data_becomes_default(self) -> None:
        assert RenderOptions(sort_data="").sort_data == "filename"

    def test_is_frozen(self) -> None:
        options = RenderOptions()

        with pytest.raises(ValidationError):
            options.data_key = "items"  # pyright: ignore[reportAttributeAccessIssue]

    def test_defaults_match_default_config(self) -> None:
        options = RenderOptions.model_validate(DEFAULT_CONFIG)

        assert options.model_dump() == RenderOptions().model_dump()


class TestResolveOptions:
    def test_no_sources_gives_defaults(self) -> None:
        assert resolve_options().model_dump() == RenderOptions().model_dump()

    def test_cli_values(self) -> None:
        options = resolve_options(
            {"root": "page.tmpl", "data": ["posts/"], "data_key": "items"}
        )

        assert options.root == Path("page.tmpl")
        assert options.data == ["posts/"]
        assert options.data_key == "items"

    def test_cli_keys_accept_dashes(self) -> None:
        options = resolve_options({"global-data": ["site.yaml"], "sort-data": "modified"})

        assert options.global_data == ["site.yaml"]
        assert options.sort_data == "modified"

    def test_none_cli_values_are_ignored(self, tmp_path: Path) -> None:
        config = tmp_path / "quire.toml"
        _ = config.write_text(tomli_w.dumps({"data-key": "posts"}))

        options = resolve_options({"data_key": None, "data": None}, config)

        assert options.data_key == "posts"
        assert options.data == []

    def test_cli_scalars_override_config(self, tmp_path: Path) -> None:
        config = tmp_path / "quire.toml"
        _ = config.write_text(
            tomli_w.dumps({"data-key": "posts", "sort-data": "modified"})
        )

        options = resolve_options({"data_key": "items"}, config)

        assert options.data_key == "items"
        assert options.sort_data == "modified"

    def test_lists_combine_cli_then_config(self, tmp_path: Path) -> None:
        config = tmp_path / "quire.toml"
        _ = config.write_text(tomli_w.dumps({"data": ["from-config.json"]}))

        options = resolve_options({"data": ["from-cli.json"]}, config)

        assert options.data == ["from-cli.json", str(tmp_path / "from-config.json")]

    def test_explicit_false_overrides_config(self, tmp_path: Path) -> None:
        config = tmp_path / "quire.toml"
        _ = config.write_text(tomli_w.dumps({"strict-undefined": True}))

        options = resolve_options({"strict_undefined": False}, config)

        assert options.strict_undefined is False

    def test_nested_logging_values(self) -> None:
        options = resolve_options({"logging": {"level": "debug", "format": "json"}})

        assert options.logging.level is LogLevel.DEBUG
        assert options.logging.format is LogFormat.JSON

    def test_collision_policy_from_string(self) -> None:
        options = resolve_options({"on-data-key-collision": "overwrite"})

        assert options.on_data_key_collision is DataKeyCollisionPolicy.OVERWRITE

    def test_invalid_value_raises_validation_error(self) -> None:
        with pytest.raises(ConfigValidationError) as exc_info:
            _ = resolve_options({"on_data_key_collision": "ignore"})

        assert exc_info.value.key == "on_data_key_collision"
        assert exc_info.value.value == "ignore"

    def test_invalid_config_value_names_source(self, tmp_path: Path) -> None:
        config = tmp_path / "quire.toml"
        _ = config.write_text(tomli_w.dumps({"logging": {"level": "loud"}}))

        with pytest.raises(ConfigValidationError) as exc_info:
            _ = resolve_options(None, config)

        assert exc_info.value.key == "logging.level"
        assert exc_info.value.source == str(config)

    def test_missing_config_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigLoadError):
            _ = resolve_options({}, tmp_path / "missing.toml")
