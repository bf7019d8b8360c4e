from cssmap.extract.comments import comments, licenses, strip_comments
from cssmap.extract.selectors import block_count, names, rules
from cssmap.extract.styles import flatten_styles

__all__ = [
    "comments",
    "licenses",
    "strip_comments",
    "block_count",
    "names",
    "rules",
    "flatten_styles",
]
