"""Uniform handle over templates of any supported language."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from quire.diagnostics import Diagnostic

    from ._language import TemplateLanguage


@dataclass(frozen=True, slots=True)
class MustacheTemplate:
    """A tokenized mustache template with its associated partials.

    Attributes:
        tokens: Token stream of the root template.
        partials: Partial name to partial source.
    """

    tokens: tuple[tuple[str, str], ...]
    partials: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class TemplateHandle:
    """A root template plus partials, all of one language.

    The executor dispatches on `language`; `engine` is opaque to callers.

    Attributes:
        name: Name of the root template.
        language: Template language of the root and every partial.
        engine: Compiled template object (a jinja2.Template for TEXT/HTML,
            a MustacheTemplate for MUSTACHE).
        partials: Names of the associated partials, in load order.
        diagnostics: Partials that were skipped while loading.
        path: Root template file, or None for in-memory sources.
    """

    name: str
    language: TemplateLanguage
    engine: object = field(repr=False)
    partials: tuple[str, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()
    path: Path | None = None
