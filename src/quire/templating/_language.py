"""Supported template languages and language detection."""

from enum import StrEnum
from pathlib import PurePath


class TemplateLanguage(StrEnum):
    """Supported template languages.

    TEXT and HTML share the Jinja2 grammar; HTML output is auto-escaped.
    MUSTACHE uses the mustache section/partial grammar.
    """

    TEXT = "tmpl"
    HTML = "hmpl"
    MUSTACHE = "mst"


_EXTENSIONS: dict[str, TemplateLanguage] = {
    "tmpl": TemplateLanguage.TEXT,
    "gotmpl": TemplateLanguage.TEXT,
    "hmpl": TemplateLanguage.HTML,
    "gohmpl": TemplateLanguage.HTML,
    "mst": TemplateLanguage.MUSTACHE,
    "mustache": TemplateLanguage.MUSTACHE,
}


def read_template_language(path: str | PurePath) -> TemplateLanguage | None:
    """Get the template language matching the extension of `path`.

    Args:
        path: A file path, a bare extension (".tmpl"), or a language name
            ("mst"). Matching is case-insensitive.

    Returns:
        The matching TemplateLanguage, or None if not supported.
    """
    text = str(path)
    suffix = PurePath(text).suffix
    identifier = (suffix if suffix else text).lower().removeprefix(".")
    return _EXTENSIONS.get(identifier)


def template_name(path: str | PurePath, language: TemplateLanguage) -> str:
    """Derive the name a template is registered and referenced under.

    Mustache partials are referenced without their extension
    (`{{> header}}`); Jinja2 templates keep the full filename
    (`{% include "header.tmpl" %}`).
    """
    pure = PurePath(path)
    if language is TemplateLanguage.MUSTACHE:
        return pure.stem
    return pure.name
