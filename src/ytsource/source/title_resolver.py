"""
ytsource 标题解析模块

为已分类的引用解析显示标题:
- 已有标题时直接同步返回（永久缓存）
- 否则按引用类型分派到对应的远程查询服务
"""

from __future__ import annotations

from collections.abc import Callable

from ..models.reference_kind import ReferenceKind
from ..models.source_reference import SourceReference
from ..utils.logger import logger
from ..youtube.title_services import (
    AutoGeneratedTitleSource,
    PlaylistTitleSource,
    alternate_title_service,
    primary_title_service,
)


def _noop(*_args) -> None:
    pass


class TitleResolver:
    """
    标题解析器

    成功时写入 reference.title 后调用 success(title)，失败时调用 error()。
    自动合辑走备用接口，该接口不回报错误，因此 error() 不会被调用。
    远程查询的回调在服务的工作线程中执行；缓存命中与不支持的类型同步回调。
    """

    def __init__(
        self,
        primary: PlaylistTitleSource | None = None,
        alternate: AutoGeneratedTitleSource | None = None,
    ):
        self.primary = primary if primary is not None else primary_title_service
        self.alternate = alternate if alternate is not None else alternate_title_service

    def resolve_title(
        self,
        reference: SourceReference,
        success: Callable[[str], None] | None = None,
        error: Callable[[], None] | None = None,
        notify_on_error: bool = True,
    ) -> None:
        success = success or _noop
        error = error or _noop

        # 已经取过标题，直接返回缓存
        if reference.title:
            success(reference.title)
            return

        def _on_title(title: str) -> None:
            reference.set_title(title)
            success(title)

        kind = reference.kind
        if kind is ReferenceKind.PLAYLIST:
            self.primary.get_playlist_title(
                playlist_id=reference.source_id,
                success=_on_title,
                error=error,
            )
        elif kind is ReferenceKind.FAVORITES or kind is ReferenceKind.CHANNEL:
            # 收藏列表以所属频道标识，两者都查询频道名称
            self.primary.get_channel_name(
                channel_id=reference.source_id,
                success=_on_title,
                error=error,
            )
        elif kind is ReferenceKind.AUTO_GENERATED:
            logger.debug(f"自动合辑 {reference.source_id} 的查询不支持错误回报，失败时不会调用 error()")
            self.alternate.get_auto_generated_playlist_title(reference.source_id, _on_title)
        else:
            # TODO: 分享列表需要单独的查询接口
            if notify_on_error:
                logger.error(f"Unhandled source kind: {kind.value}")
            error()


# 全局解析器实例
title_resolver = TitleResolver()


def resolve_title(
    reference: SourceReference,
    success: Callable[[str], None] | None = None,
    error: Callable[[], None] | None = None,
    notify_on_error: bool = True,
) -> None:
    """使用全局解析器解析标题"""
    title_resolver.resolve_title(reference, success, error, notify_on_error)
