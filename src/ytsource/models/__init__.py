"""
ytsource 数据模型层

包含引用类型与已分类的媒体引用。
"""

from .reference_kind import ReferenceKind, derive_listing_url, needs_listing, uses_alternate_api
from .source_reference import SourceReference

__all__ = [
    "ReferenceKind",
    "SourceReference",
    "derive_listing_url",
    "needs_listing",
    "uses_alternate_api",
]
