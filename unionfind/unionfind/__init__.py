from .errors import UnionFindError, ElementError, EdgeListError, ConfigError
from .utils import to_element
from .edges import iter_pairs
from .union_find import UnionFind

__all__ = [
    "UnionFind",
    "iter_pairs",
    "to_element",
    "UnionFindError",
    "ElementError",
    "EdgeListError",
    "ConfigError",
]
