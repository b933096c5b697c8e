"""
ytsource 链接来源功能域

包含链接分类、列表地址推导、标题解析。
"""

from .title_resolver import TitleResolver, resolve_title, title_resolver
from .url_classifier import (
    SHARED_PLAYLIST_MARKER,
    SOURCE_PATTERNS,
    classify,
    extract_token_id,
    parse_source_info,
    parse_video_id,
)

__all__ = [
    # 链接分类
    "SHARED_PLAYLIST_MARKER",
    "SOURCE_PATTERNS",
    "classify",
    "extract_token_id",
    "parse_source_info",
    "parse_video_id",
    # 标题解析
    "TitleResolver",
    "resolve_title",
    "title_resolver",
]
