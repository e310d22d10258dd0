"""Query-string builder for CRNK filter, sort, include, fields and paging parameters."""

from .basic import BasicFilter
from .builder import NestedFilterBuilder
from .collection import FilterCollection, filter_array
from .exceptions import CrnkFilteringError, OperatorNotFoundError, ValidationError
from .filter_spec import FilterSpec, SanitizedFilter
from .nested import NestedFilter
from .operators import (
    FilterOperator,
    NestingOperator,
    parse_filter_operator,
    parse_nesting_operator,
)
from .pagination import PageEvent, PaginationSpec
from .params import QueryParams
from .sanitizer import ArrayOf, FilterValue, Null, Scalar, sanitize_value
from .sort import SortDirection, SortSpec, sort_param
from .tree import Fragment, Group, Leaf, Negation, render

BasicFilterEncoder = BasicFilter
NestedFilterEncoder = NestedFilter

__all__ = [
    # Filters
    "FilterOperator",
    "NestingOperator",
    "FilterSpec",
    "SanitizedFilter",
    "FilterCollection",
    "filter_array",
    "parse_filter_operator",
    "parse_nesting_operator",
    # Values
    "FilterValue",
    "Scalar",
    "ArrayOf",
    "Null",
    "sanitize_value",
    # Encoders
    "BasicFilter",
    "BasicFilterEncoder",
    "NestedFilter",
    "NestedFilterEncoder",
    "NestedFilterBuilder",
    # Nested filter tree
    "Leaf",
    "Group",
    "Negation",
    "Fragment",
    "render",
    # Sort / pagination
    "SortDirection",
    "SortSpec",
    "sort_param",
    "PageEvent",
    "PaginationSpec",
    # Parameters
    "QueryParams",
    # Exceptions
    "CrnkFilteringError",
    "ValidationError",
    "OperatorNotFoundError",
]
