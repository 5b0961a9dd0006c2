"""quire renders one template against data merged from many files.

Example:
    from quire.config import resolve_options
    from quire.pipeline import render

    options = resolve_options({"root": "page.tmpl", "data": ["posts/"]})
    print(render(options).output)
"""

from quire.config import RenderOptions, resolve_options
from quire.pipeline import RenderResult, SuperDataResult, build_super_data, render

__all__ = [
    "RenderOptions",
    "RenderResult",
    "SuperDataResult",
    "build_super_data",
    "render",
    "resolve_options",
]
