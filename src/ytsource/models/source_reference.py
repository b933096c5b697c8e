"""Classified media reference (kind + id + derived listing URL + cached title)."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..utils.logger import logger
from .reference_kind import ReferenceKind, derive_listing_url, needs_listing, uses_alternate_api


@dataclass
class SourceReference:
    """
    已分类的媒体引用

    kind / source_id 任一变化都会立即重新计算 listing_url（只读）；
    title 只写入一次，之后作为永久缓存，再次赋值会被忽略。
    """

    kind: ReferenceKind = ReferenceKind.NONE
    source_id: str = ""
    title: str = ""
    _listing_url: str = field(default="", init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._refresh_listing_url()

    def __setattr__(self, name: str, value: object) -> None:
        if name == "title" and self.title and value != self.title:
            logger.debug(f"标题已缓存，忽略新值: {self.title!r} -> {value!r}")
            return
        super().__setattr__(name, value)
        if name in ("kind", "source_id"):
            self._refresh_listing_url()

    @classmethod
    def from_url(cls, url: str) -> SourceReference:
        """解析粘贴的链接并创建引用"""
        from ..source.url_classifier import parse_source_info

        kind, source_id = parse_source_info(url)
        return cls(kind=kind, source_id=source_id)

    def update(self, kind: ReferenceKind | None = None, source_id: str | None = None) -> None:
        """修改类型和/或 ID，并立即重新计算 listing_url"""
        # 直接赋值同样会触发 __setattr__ 中的重新计算
        if source_id is not None:
            self.source_id = source_id
        if kind is not None:
            self.kind = kind

    def set_title(self, title: str) -> bool:
        """写入标题（仅首次生效）。返回是否写入成功。"""
        if not title or self.title:
            if title and title != self.title:
                logger.debug(f"标题已缓存，忽略新值: {self.title!r} -> {title!r}")
            return False
        self.title = title
        return True

    @property
    def listing_url(self) -> str:
        return self._listing_url

    @property
    def needs_listing(self) -> bool:
        return needs_listing(self.kind)

    @property
    def uses_alternate_api(self) -> bool:
        return uses_alternate_api(self.kind)

    def _refresh_listing_url(self) -> None:
        self._listing_url = derive_listing_url(self.kind, self.source_id)
