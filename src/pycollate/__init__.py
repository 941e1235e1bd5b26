"""pycollate - helpers for indexing, grouping and searching in-memory collections."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pycollate")
except PackageNotFoundError:
    __version__ = "0+local"
from pycollate.access import safe_get
from pycollate.combinators import flatten, product
from pycollate.config import CollateConfig, Presence
from pycollate.exceptions import CollateConfigError, CollateError, EmptyPathError
from pycollate.nested import push_nested, set_nested
from pycollate.reducers import fold, group_by, index_by, key_value
from pycollate.search import nested_object_find, nested_object_search, preferential_key_search

__all__ = [
    "__version__",
    "CollateConfig",
    "CollateConfigError",
    "CollateError",
    "EmptyPathError",
    "Presence",
    "flatten",
    "fold",
    "group_by",
    "index_by",
    "key_value",
    "nested_object_find",
    "nested_object_search",
    "preferential_key_search",
    "product",
    "push_nested",
    "safe_get",
    "set_nested",
]
