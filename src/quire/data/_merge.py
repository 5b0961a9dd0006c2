"""Merging of keyed data and assembly of the render context."""

from __future__ import annotations

from typing import TYPE_CHECKING

from quire.exceptions import DataKeyCollisionError

from ._models import DEFAULT_DATA_KEY, DataKeyCollisionPolicy, KeyedData

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from structlog.typing import FilteringBoundLogger


def merge_data(*containers: Mapping[str, object]) -> tuple[KeyedData, list[str]]:
    """Combine all keys of `containers` into one mapping.

    Containers are processed in the order given. The first value seen for a
    key is kept; later values for that key are dropped and the key is
    reported as a conflict.

    Args:
        *containers: Keyed data in precedence order (highest first).

    Returns:
        Tuple of (merged data, conflicting keys). Each conflicting key is
        listed once, in the order its first conflict was found.
    """
    merged: KeyedData = {}
    conflicts: dict[str, None] = {}

    for container in containers:
        for key, value in container.items():
            if key in merged:
                conflicts.setdefault(key, None)
            else:
                merged[key] = value

    return merged, list(conflicts)


def assemble_super_data(
    data_key: str,
    data: Sequence[KeyedData],
    *global_data: Mapping[str, object],
    on_collision: DataKeyCollisionPolicy = DataKeyCollisionPolicy.ERROR,
    logger: FilteringBoundLogger | None = None,
) -> tuple[KeyedData, list[str]]:
    """Build the render context from global data and ordered data.

    All `global_data` is merged flatly into the top level (see merge_data),
    then the ordered `data` list is attached under `data_key`.

    Args:
        data_key: Key for the data list. Empty means "data".
        data: Per-file data, already in render order.
        *global_data: Global data in precedence order (highest first).
        on_collision: Policy when `data_key` is already a global key.
        logger: Optional logger, used to warn when overwriting.

    Returns:
        Tuple of (super data, global merge conflicts).

    Raises:
        DataKeyCollisionError: If `data_key` is a global key and the policy
            is ERROR.
    """
    key = data_key or DEFAULT_DATA_KEY
    super_data, conflicts = merge_data(*global_data)

    if key in super_data:
        if on_collision is DataKeyCollisionPolicy.ERROR:
            msg = f"Global data already defines the data key '{key}'"
            raise DataKeyCollisionError(msg, key=key)

        if logger is None:
            from quire.utils import create_logger  # noqa: PLC0415

            logger = create_logger()
        logger.warning(
            "Global data key matches the data key and will be overwritten", key=key
        )

    super_data[key] = list(data)
    return super_data, conflicts
