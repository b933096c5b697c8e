"""
引用类型模块

定义粘贴链接所指向的媒体集合类型，以及与类型绑定的列表地址推导规则。
"""

from __future__ import annotations

from enum import Enum

# ── 引用类型枚举 ──────────────────────────────────────────

class ReferenceKind(str, Enum):
    """链接指向的媒体集合类型。"""

    NONE = "none"
    VIDEO = "video"
    CHANNEL = "channel"
    PLAYLIST = "playlist"
    FAVORITES = "favorites"
    AUTO_GENERATED = "auto_generated"  # YouTube 自动生成的合辑 (Mix)
    SHARED_PLAYLIST = "shared_playlist"

    @property
    def label(self) -> str:
        return _KIND_LABELS.get(self, self.value)


_KIND_LABELS: dict[ReferenceKind, str] = {
    ReferenceKind.NONE: "未识别",
    ReferenceKind.VIDEO: "视频",
    ReferenceKind.CHANNEL: "频道",
    ReferenceKind.PLAYLIST: "播放列表",
    ReferenceKind.FAVORITES: "收藏列表",
    ReferenceKind.AUTO_GENERATED: "自动合辑",
    ReferenceKind.SHARED_PLAYLIST: "分享列表",
}


# ── 列表地址 ──────────────────────────────────────────────

# 需要向服务器拉取条目列表才能创建的类型
_LISTING_KINDS = frozenset(
    {
        ReferenceKind.CHANNEL,
        ReferenceKind.FAVORITES,
        ReferenceKind.PLAYLIST,
        ReferenceKind.AUTO_GENERATED,
    }
)


def needs_listing(kind: ReferenceKind) -> bool:
    return kind in _LISTING_KINDS


def uses_alternate_api(kind: ReferenceKind) -> bool:
    """自动合辑只能通过新版 (v3) API 查询。"""
    return kind is ReferenceKind.AUTO_GENERATED


def derive_listing_url(kind: ReferenceKind, source_id: str, base_url: str | None = None) -> str:
    """
    根据类型和 ID 拼接列表抓取地址

    Args:
        kind: 引用类型
        source_id: 视频 / 频道 / 播放列表 ID
        base_url: 基础地址，None 时读取配置 listing_base_url

    Returns:
        列表地址；不需要（或不支持）在该基础地址下抓取的类型返回空字符串
    """
    if base_url is None:
        from ..core.config_manager import config_manager

        base_url = str(config_manager.get("listing_base_url") or "")

    if kind is ReferenceKind.CHANNEL:
        return f"{base_url}users/{source_id}/uploads"
    if kind is ReferenceKind.FAVORITES:
        return f"{base_url}users/{source_id}/favorites"
    if kind is ReferenceKind.PLAYLIST:
        return f"{base_url}playlists/{source_id}"
    # 其余类型不需要在此地址下加载
    return ""
