"""
Macro discovery and resolution for query files.
"""

from .discovery import QueryFileTree, discover_macros, scan_macros, strip_function_block
from .resolver import AnswerCache, MacroResolver

__all__ = [
    "AnswerCache",
    "MacroResolver",
    "QueryFileTree",
    "discover_macros",
    "scan_macros",
    "strip_function_block",
]
