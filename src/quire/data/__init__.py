"""Data loading, merging and render context assembly.

Basic usage:
    from quire.data import assemble_super_data, load_data_files, merge_data
    from quire.files import sort_loaded

    globals_ = load_data_files(["site.toml"])
    pages = load_data_files(["pages/"])

    context, conflicts = assemble_super_data(
        "pages",
        sort_loaded(pages.files, "modified-desc"),
        *globals_.files.values(),
    )
"""

from ._formats import DataFormat, is_data_format, read_data_format
from ._loader import load_data, load_data_file, load_data_files
from ._merge import assemble_super_data, merge_data
from ._models import (
    DEFAULT_DATA_KEY,
    DataKeyCollisionPolicy,
    KeyedData,
    LoadedFileSet,
)

__all__ = [
    "DEFAULT_DATA_KEY",
    "DataFormat",
    "DataKeyCollisionPolicy",
    "KeyedData",
    "LoadedFileSet",
    "assemble_super_data",
    "is_data_format",
    "load_data",
    "load_data_file",
    "load_data_files",
    "merge_data",
    "read_data_format",
]
