"""Rendering of loaded templates."""

from __future__ import annotations

from collections import defaultdict
from typing import TYPE_CHECKING, cast

import chevron
from pydantic import BaseModel

from quire.exceptions import TemplateExecutionError

from ._handle import MustacheTemplate
from ._language import TemplateLanguage

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    import jinja2

    from ._handle import TemplateHandle


def _render_jinja(handle: TemplateHandle, context: dict[str, object]) -> str:
    template = cast("jinja2.Template", handle.engine)
    try:
        return template.render(context)
    except Exception as e:
        msg = f"Failed to render template '{handle.name}': {e}"
        raise TemplateExecutionError(
            msg, name=handle.name, language=handle.language.value
        ) from e


def _render_mustache(handle: TemplateHandle, context: dict[str, object]) -> str:
    template = cast("MustacheTemplate", handle.engine)
    # Unknown partial names render empty instead of being looked up on disk
    partials: defaultdict[str, str] = defaultdict(str, template.partials)
    try:
        return cast(
            "str",
            chevron.render(  # pyright: ignore[reportUnknownMemberType]
                template=list(template.tokens),
                data=context,
                partials_dict=partials,
            ),
        )
    except Exception as e:
        msg = f"Failed to render template '{handle.name}': {e}"
        raise TemplateExecutionError(
            msg, name=handle.name, language=handle.language.value
        ) from e


_EXECUTORS: dict[TemplateLanguage, Callable[[TemplateHandle, dict[str, object]], str]] = {
    TemplateLanguage.TEXT: _render_jinja,
    TemplateLanguage.HTML: _render_jinja,
    TemplateLanguage.MUSTACHE: _render_mustache,
}


def execute_template(
    handle: TemplateHandle | None,
    context: BaseModel | Mapping[str, object],
) -> str:
    """Render a loaded template with context.

    Args:
        handle: Template handle from load_template_file or load_template_string.
        context: Pydantic model or dict for template variables.

    Returns:
        Rendered output.

    Raises:
        TemplateExecutionError: If there is no handle, no executor for its
            language, or the template engine fails.
    """
    if handle is None:
        msg = "Unable to infer template type: no template loaded"
        raise TemplateExecutionError(msg)

    executor = _EXECUTORS.get(handle.language)
    if executor is None:
        msg = f"Unable to infer template type '{handle.language}'"
        raise TemplateExecutionError(msg, name=handle.name, language=str(handle.language))

    if isinstance(context, BaseModel):
        context_dict = context.model_dump()
    else:
        context_dict = dict(context)

    return executor(handle, context_dict)
