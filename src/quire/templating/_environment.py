"""Jinja2 Environment factory."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from jinja2 import Environment


@dataclass(slots=True, frozen=True)
class EnvironmentConfig:
    """Configuration for Jinja2 Environment.

    Attributes:
        autoescape: Enable autoescaping (HTML templates).
        strict_undefined: Raise on undefined variables instead of rendering
            them as empty strings.
        keep_trailing_newline: Preserve trailing newline in templates.
    """

    autoescape: bool = False
    strict_undefined: bool = False
    keep_trailing_newline: bool = True


def create_environment(
    sources: Mapping[str, str],
    *,
    config: EnvironmentConfig | None = None,
) -> Environment:
    """Create a Jinja2 Environment over in-memory template sources.

    Only the given sources are resolvable by name from `{% include %}`,
    `{% import %}` and `{% extends %}`; nothing is looked up on disk.

    Args:
        sources: Mapping of template name to template source.
        config: Optional environment configuration. If None, uses defaults.

    Returns:
        Configured Jinja2 Environment.

    Example:
        env = create_environment(
            {"page.tmpl": '{% include "header.tmpl" %}', "header.tmpl": "# {{ title }}"}
        )
        env.get_template("page.tmpl").render(title="Hello")
    """
    from jinja2 import DictLoader, Environment, StrictUndefined, Undefined  # noqa: PLC0415

    if config is None:
        config = EnvironmentConfig()

    env: Environment = Environment(
        loader=DictLoader(dict(sources)),
        autoescape=config.autoescape,  # noqa: S701
        undefined=StrictUndefined if config.strict_undefined else Undefined,
        keep_trailing_newline=config.keep_trailing_newline,
    )

    return env
