"""Loading of root templates and their partials."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from chevron.tokenizer import ChevronError, tokenize
from jinja2 import TemplateSyntaxError

from quire.diagnostics import Diagnostic
from quire.exceptions import (
    TemplateLoadError,
    TemplateNotFoundError,
    UnsupportedTemplateLanguageError,
)
from quire.files import resolve_paths_with_diagnostics

from ._environment import EnvironmentConfig, create_environment
from ._handle import MustacheTemplate, TemplateHandle
from ._language import TemplateLanguage, read_template_language, template_name

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from structlog.typing import FilteringBoundLogger


def _resolve_language(language: TemplateLanguage | str) -> TemplateLanguage:
    resolved = (
        language
        if isinstance(language, TemplateLanguage)
        else read_template_language(language)
    )
    if resolved is None:
        msg = f"'{language}' is not a supported template language"
        raise UnsupportedTemplateLanguageError(msg, identifier=str(language))
    return resolved


def _compile(
    language: TemplateLanguage,
    name: str,
    sources: Mapping[str, str],
    *,
    strict_undefined: bool,
    paths: Mapping[str, Path] | None = None,
) -> object:
    """Parse every source and return the engine object for `name`.

    Raises:
        TemplateLoadError: If any source fails to parse. The error names the
            failing file when `paths` knows it.
    """
    paths = paths or {}

    if language is TemplateLanguage.MUSTACHE:
        tokens: tuple[tuple[str, str], ...] = ()
        for source_name, source in sources.items():
            try:
                parsed = tuple(tokenize(source))
            except ChevronError as e:
                where = paths.get(source_name, source_name)
                msg = f"Failed to parse template '{where}': {e}"
                raise TemplateLoadError(msg, path=paths.get(source_name)) from e
            if source_name == name:
                tokens = parsed
        partials = {key: value for key, value in sources.items() if key != name}
        return MustacheTemplate(tokens=tokens, partials=partials)

    config = EnvironmentConfig(
        autoescape=language is TemplateLanguage.HTML,
        strict_undefined=strict_undefined,
    )
    env = create_environment(sources, config=config)
    for source_name in sources:
        try:
            _ = env.get_template(source_name)
        except TemplateSyntaxError as e:
            where = paths.get(source_name, source_name)
            msg = f"Failed to parse template '{where}': {e}"
            raise TemplateLoadError(msg, path=paths.get(source_name)) from e
    return env.get_template(name)


def load_template_string(
    language: TemplateLanguage | str,
    root: str,
    partials: Mapping[str, str] | None = None,
    *,
    name: str = "template",
    strict_undefined: bool = False,
) -> TemplateHandle:
    """Build a template handle from in-memory sources.

    Args:
        language: Template language, or an extension naming one ("tmpl").
        root: Root template source.
        partials: Partial name to partial source. Every partial must parse.
        name: Name to register the root template under.
        strict_undefined: Raise on undefined variables when rendering
            TEXT/HTML templates.

    Returns:
        TemplateHandle for the root template.

    Raises:
        UnsupportedTemplateLanguageError: If the language is not supported.
        TemplateLoadError: If the root or a partial fails to parse.
    """
    resolved = _resolve_language(language)
    partials = dict(partials or {})
    if name in partials:
        msg = f"Partial name '{name}' is already used by the root template"
        raise TemplateLoadError(msg)

    sources = {name: root, **partials}
    engine = _compile(resolved, name, sources, strict_undefined=strict_undefined)
    return TemplateHandle(
        name=name,
        language=resolved,
        engine=engine,
        partials=tuple(partials),
    )


def _read_root(path: Path) -> tuple[TemplateLanguage, str]:
    if not path.exists():
        msg = f"Template file not found: {path}"
        raise TemplateNotFoundError(msg, path=path)
    if path.is_dir():
        msg = f"Template path is a directory, not a file: {path}"
        raise TemplateLoadError(msg, path=path)

    language = read_template_language(path)
    if language is None:
        identifier = path.suffix.lower().removeprefix(".") or path.name
        msg = f"'{identifier}' is not a supported template language: {path}"
        raise UnsupportedTemplateLanguageError(msg, identifier=identifier)

    try:
        return language, path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Failed to read template '{path}': {e}"
        raise TemplateLoadError(msg, path=path) from e


def load_template_file(
    root_path: str | Path,
    *partial_paths: str | Path,
    strict_undefined: bool = False,
    logger: FilteringBoundLogger | None = None,
) -> TemplateHandle:
    """Load a root template file and associate partials with it.

    Partial inputs may be plain paths, globs or directories. Partials that
    cannot be used (another language, unreadable, or a name already taken)
    are skipped with a diagnostic.

    Args:
        root_path: The root template file. Its extension selects the language.
        *partial_paths: Partial inputs.
        strict_undefined: Raise on undefined variables when rendering
            TEXT/HTML templates.
        logger: Optional logger for skipped partials.

    Returns:
        TemplateHandle for the root template.

    Raises:
        TemplateNotFoundError: If the root file does not exist.
        TemplateLoadError: If the root is a directory, or the root or a partial
            of the root's language fails to parse.
        UnsupportedTemplateLanguageError: If the root extension is not a
            supported template language.
    """
    if logger is None:
        from quire.utils import create_logger  # noqa: PLC0415

        logger = create_logger()

    root = Path(root_path)
    language, root_source = _read_root(root)
    name = template_name(root, language)

    sources: dict[str, str] = {name: root_source}
    paths: dict[str, Path] = {name: root}
    partials, diagnostics = _collect_partials(partial_paths, language, sources, paths)

    for diagnostic in diagnostics:
        logger.warning(
            "Skipping partial", path=str(diagnostic.path), reason=diagnostic.message
        )

    engine = _compile(
        language, name, sources, strict_undefined=strict_undefined, paths=paths
    )
    return TemplateHandle(
        name=name,
        language=language,
        engine=engine,
        partials=tuple(partials),
        diagnostics=tuple(diagnostics),
        path=root,
    )


def _collect_partials(
    inputs: Iterable[str | Path],
    language: TemplateLanguage,
    sources: dict[str, str],
    paths: dict[str, Path],
) -> tuple[list[str], list[Diagnostic]]:
    """Read usable partial files into `sources` and `paths`.

    Returns:
        Tuple of (partial names in load order, diagnostics for skipped inputs).
    """
    resolved, diagnostics = resolve_paths_with_diagnostics(inputs)
    names: list[str] = []

    for path in resolved:
        partial_language = read_template_language(path)
        if partial_language is None:
            diagnostics.append(Diagnostic(path, "unsupported template language"))
            continue
        if partial_language is not language:
            message = (
                f"template language '{partial_language}' does not match "
                f"root template language '{language}'"
            )
            diagnostics.append(Diagnostic(path, message))
            continue

        partial = template_name(path, language)
        if partial in sources:
            message = f"template name '{partial}' is already in use by {paths[partial]}"
            diagnostics.append(Diagnostic(path, message))
            continue

        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            diagnostics.append(Diagnostic(path, f"unable to read partial: {e}"))
            continue

        sources[partial] = source
        paths[partial] = path
        names.append(partial)

    return names, diagnostics
