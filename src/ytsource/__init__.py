"""
ytsource

识别粘贴的 YouTube 链接所指向的媒体集合（视频、频道、播放列表、收藏、
自动合辑、分享列表），并按需查询其显示标题。
"""

from .models import ReferenceKind, SourceReference, derive_listing_url, needs_listing, uses_alternate_api
from .source import TitleResolver, classify, parse_video_id, resolve_title

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ReferenceKind",
    "SourceReference",
    "TitleResolver",
    "classify",
    "derive_listing_url",
    "needs_listing",
    "parse_video_id",
    "resolve_title",
    "uses_alternate_api",
]
