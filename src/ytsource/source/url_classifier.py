"""
ytsource 链接分类模块

从任意粘贴的链接中识别媒体集合类型并提取 ID:
- 播放列表 / 收藏列表 / 自动合辑 / 频道 / 分享列表 (按标记匹配)
- 单个视频 (正则兜底)
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..models.reference_kind import ReferenceKind
from ..models.source_reference import SourceReference
from ..utils.logger import logger

# 分享列表的链接前缀
SHARED_PLAYLIST_MARKER = "streamus:"

# 视频 ID 固定为 11 位
VIDEO_ID_LENGTH = 11

VIDEO_URL_REGEX = re.compile(r"^.*(youtu.be/|v/|u/\w/|embed/|watch\?v=|watch\?.*?&v=)([^#&?]*).*")

# v3 API 要求 ID 保留标记中的前缀
_PREFIX_KEEPING_TOKENS: dict[str, str] = {
    "list=AL": "AL",
    "p=AL": "AL",
    "list=RD": "RD",
    "p=RD": "RD",
}


@dataclass(frozen=True)
class SourcePattern:
    """一组标记及其对应的引用类型"""

    tokens: tuple[str, ...]
    kind: ReferenceKind


# 按顺序全部检查，后匹配的组覆盖先匹配的组
SOURCE_PATTERNS: tuple[SourcePattern, ...] = (
    SourcePattern(("list=PL", "p=PL", "list=RD", "p=RD"), ReferenceKind.PLAYLIST),
    SourcePattern(("list=FL", "p=FL"), ReferenceKind.FAVORITES),
    SourcePattern(("list=AL", "p=AL"), ReferenceKind.AUTO_GENERATED),
    SourcePattern(("/user/", "/channel/", "list=UU", "p=UU"), ReferenceKind.CHANNEL),
    SourcePattern((SHARED_PLAYLIST_MARKER,), ReferenceKind.SHARED_PLAYLIST),
)


def extract_token_id(url: str, token: str) -> str:
    """
    取出标记之后、下一个 & 之前的内容

    Returns:
        提取到的 ID；链接中没有该标记时返回空字符串
    """
    parts = url.split(token)
    if len(parts) < 2:
        return ""

    source_id = parts[1].split("&", 1)[0]
    prefix = _PREFIX_KEEPING_TOKENS.get(token)
    if prefix:
        source_id = prefix + source_id
    return source_id


def parse_video_id(url: str) -> str | None:
    """从分享 / 嵌入 / 观看链接中解析视频 ID，长度不是 11 位时视为无效"""
    match = VIDEO_URL_REGEX.match(url)
    if match and len(match.group(2)) == VIDEO_ID_LENGTH:
        return match.group(2)
    return None


def parse_source_info(url: str) -> tuple[ReferenceKind, str]:
    """
    识别链接类型并提取 ID

    Args:
        url: 用户粘贴的任意文本

    Returns:
        (kind, source_id)，无法识别时为 (ReferenceKind.NONE, "")
    """
    if not isinstance(url, str) or not url:
        return ReferenceKind.NONE, ""

    kind = ReferenceKind.NONE
    source_id = ""

    for pattern in SOURCE_PATTERNS:
        for token in pattern.tokens:
            candidate = extract_token_id(url, token)
            if candidate:
                kind = pattern.kind
                source_id = candidate
                break

    if kind is ReferenceKind.NONE:
        video_id = parse_video_id(url)
        if video_id:
            kind = ReferenceKind.VIDEO
            source_id = video_id

    if kind is ReferenceKind.NONE:
        logger.debug(f"无法识别链接类型: {url}")

    return kind, source_id


def classify(url: str) -> SourceReference:
    """将粘贴的链接解析为 SourceReference"""
    return SourceReference.from_url(url)
