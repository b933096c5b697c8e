"""
ytsource YouTube 服务域

包含播放列表标题 / 频道名称的远程查询服务。
"""

from .title_services import (
    AlternateTitleService,
    AutoGeneratedTitleSource,
    PlaylistTitleSource,
    PrimaryTitleService,
    TitleLookupError,
    TitleLookupWorker,
    alternate_title_service,
    primary_title_service,
)

__all__ = [
    # 服务协议
    "PlaylistTitleSource",
    "AutoGeneratedTitleSource",
    # 服务实现
    "PrimaryTitleService",
    "AlternateTitleService",
    "TitleLookupWorker",
    "TitleLookupError",
    "primary_title_service",
    "alternate_title_service",
]
