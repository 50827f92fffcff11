from binary_search._contracts import UnsortedInputError, ensures, requires, sorted_input
from binary_search._core import binary_search
from binary_search._engine import ObligationResult, check_library, check_search
from binary_search._exponential import exponential_search
from binary_search._interpolation import interpolation_search, linear_estimate, linear_interpolation_search
from binary_search._ranks import leftmost_rank, rightmost_rank
from binary_search._strategies import search_inputs, sorted_lists, unsorted_lists
from binary_search._uniform import MAX_LOOKUP_TABLE_SIZE, LookupTableOverflowError, UniformBinarySearch
from binary_search._util import is_sorted

__all__ = [
    "MAX_LOOKUP_TABLE_SIZE",
    "LookupTableOverflowError",
    "ObligationResult",
    "UniformBinarySearch",
    "UnsortedInputError",
    "binary_search",
    "check_library",
    "check_search",
    "ensures",
    "exponential_search",
    "interpolation_search",
    "is_sorted",
    "leftmost_rank",
    "linear_estimate",
    "linear_interpolation_search",
    "requires",
    "rightmost_rank",
    "search_inputs",
    "sorted_input",
    "sorted_lists",
    "unsorted_lists",
]
