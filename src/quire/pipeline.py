"""End-to-end render pipeline.

Ties the loaders together: global data and data files are loaded, ordered
and assembled into the render context, then the root template is loaded
with its partials and executed against that context.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from quire.data import assemble_super_data, load_data_files
from quire.exceptions import ConfigValidationError
from quire.files import sort_loaded
from quire.templating import execute_template, load_template_file

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from quire.config import RenderOptions
    from quire.data import KeyedData
    from quire.diagnostics import Diagnostic


@dataclass(frozen=True, slots=True)
class SuperDataResult:
    """The assembled render context.

    Attributes:
        context: Global data merged at the top level plus the ordered data
            list under the data key.
        conflicts: Global keys defined by more than one global data file.
        diagnostics: Inputs skipped while loading.
    """

    context: KeyedData = field(default_factory=dict)
    conflicts: tuple[str, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()


@dataclass(frozen=True, slots=True)
class RenderResult:
    """Output of a render plus what was learned on the way."""

    output: str
    context: KeyedData = field(default_factory=dict)
    conflicts: tuple[str, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()


def build_super_data(
    options: RenderOptions,
    *,
    logger: FilteringBoundLogger | None = None,
) -> SuperDataResult:
    """Load all data inputs and assemble the render context.

    Args:
        options: Resolved render options.
        logger: Optional logger for warnings.

    Returns:
        SuperDataResult for the options.

    Raises:
        DataKeyCollisionError: If a global key equals the data key and the
            collision policy is ERROR.
        FileOrderError: If ordering by modification time fails.
        InvalidSortOrderError: If the sort order is invalid and strict.
    """
    if logger is None:
        from quire.utils import create_logger  # noqa: PLC0415

        logger = create_logger()

    global_files = load_data_files(options.global_data, logger=logger)
    data_files = load_data_files(options.data, logger=logger)

    ordered = sort_loaded(
        data_files.files,
        options.sort_data,
        strict=options.strict_sort_order,
        logger=logger,
    )
    context, conflicts = assemble_super_data(
        options.data_key,
        ordered,
        *global_files.files.values(),
        on_collision=options.on_data_key_collision,
        logger=logger,
    )

    for key in conflicts:
        logger.warning("merge conflict for global data key", key=key)

    logger.debug(
        "Assembled render context",
        global_files=len(global_files),
        data_files=len(data_files),
        data_key=options.data_key,
    )

    return SuperDataResult(
        context=context,
        conflicts=tuple(conflicts),
        diagnostics=(*global_files.diagnostics, *data_files.diagnostics),
    )


def render(
    options: RenderOptions,
    *,
    logger: FilteringBoundLogger | None = None,
) -> RenderResult:
    """Render the root template of `options`.

    Args:
        options: Resolved render options. `root` must be set.
        logger: Optional logger for warnings.

    Returns:
        RenderResult holding the rendered output.

    Raises:
        ConfigValidationError: If no root template is configured.
        DataError: If the render context cannot be assembled.
        TemplateError: If the template cannot be loaded or executed.
    """
    if options.root is None:
        msg = "A root template is required"
        raise ConfigValidationError(
            msg, key="root", value=None, expected="path to a template file"
        )

    if logger is None:
        from quire.utils import create_logger  # noqa: PLC0415

        logger = create_logger()

    super_data = build_super_data(options, logger=logger)
    handle = load_template_file(
        options.root,
        *options.partials,
        strict_undefined=options.strict_undefined,
        logger=logger,
    )
    output = execute_template(handle, super_data.context)

    return RenderResult(
        output=output,
        context=super_data.context,
        conflicts=super_data.conflicts,
        diagnostics=(*super_data.diagnostics, *handle.diagnostics),
    )
