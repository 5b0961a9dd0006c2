"""Template loading and rendering.

Three template languages are supported: TEXT (`.tmpl`) and HTML (`.hmpl`)
templates use Jinja2, with HTML output auto-escaped; MUSTACHE (`.mst`)
templates use chevron. A root template and its partials must share one
language.

Usage:
    from quire.templating import execute_template, load_template_file

    handle = load_template_file("page.tmpl", "partials/")
    output = execute_template(handle, {"title": "Hello"})
"""

from ._environment import EnvironmentConfig, create_environment
from ._executor import execute_template
from ._handle import MustacheTemplate, TemplateHandle
from ._language import TemplateLanguage, read_template_language, template_name
from ._loader import load_template_file, load_template_string

__all__ = [
    "EnvironmentConfig",
    "MustacheTemplate",
    "TemplateHandle",
    "TemplateLanguage",
    "create_environment",
    "execute_template",
    "load_template_file",
    "load_template_string",
    "read_template_language",
    "template_name",
]
