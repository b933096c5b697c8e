"""
ytsource 标题查询服务模块

按引用 ID 查询播放列表标题 / 频道名称:
- 主服务 (版本 A): yt-dlp 扁平解析，支持成功 / 失败回调
- 备用服务 (版本 B): YouTube Data API v3，仅有成功回调
- 网络请求在 QThread 中执行，回调在工作线程中直接调用，无需 Qt 事件循环
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

import requests
import yt_dlp
from yt_dlp.utils import DownloadError
from PySide6.QtCore import QThread, Qt, Signal

from ..core.config_manager import config_manager
from ..utils.error_parser import parse_lookup_error
from ..utils.logger import logger

TitleCallback = Callable[[str], None]
ErrorCallback = Callable[[], None]


class TitleLookupError(RuntimeError):
    """远程标题查询失败"""


# ── 服务协议 ──────────────────────────────────────────────

class PlaylistTitleSource(Protocol):
    def get_playlist_title(
        self, *, playlist_id: str, success: TitleCallback, error: ErrorCallback
    ) -> None: ...

    def get_channel_name(
        self, *, channel_id: str, success: TitleCallback, error: ErrorCallback
    ) -> None: ...


class AutoGeneratedTitleSource(Protocol):
    # 该版本接口没有失败回调
    def get_auto_generated_playlist_title(self, playlist_id: str, success: TitleCallback) -> None: ...


# ── URL 构建 ──────────────────────────────────────────────

def playlist_url_for(playlist_id: str) -> str:
    """分类时 PL 前缀已被消耗，这里补回；RD 合辑保留原样"""
    if playlist_id.startswith(("PL", "RD")):
        return f"https://www.youtube.com/playlist?list={playlist_id}"
    return f"https://www.youtube.com/playlist?list=PL{playlist_id}"


def channel_url_for(channel_id: str) -> str:
    """
    将频道标识转换为频道地址

    - UC 开头: /channel/<id>
    - 22 位 (UU / FL 标记剩余部分): /channel/UC<id>
    - 其他视为旧版用户名: /user/<name>
    """
    channel_id = channel_id.strip().strip("/")
    if channel_id.startswith("UC"):
        return f"https://www.youtube.com/channel/{channel_id}"
    if len(channel_id) == 22:
        return f"https://www.youtube.com/channel/UC{channel_id}"
    return f"https://www.youtube.com/user/{channel_id}"


# ── 阻塞查询 (在工作线程中调用) ───────────────────────────

def _request_timeout() -> int:
    try:
        return int(config_manager.get("title_request_timeout", 10))
    except (TypeError, ValueError):
        return 10


def build_ydl_options() -> dict[str, Any]:
    """构造仅用于读取元数据的 yt-dlp 选项"""
    ydl_opts: dict[str, Any] = {
        "quiet": True,
        "no_warnings": True,
        "skip_download": True,
        # 只需要列表本身的标题，不展开条目
        "extract_flat": True,
        "playlistend": 1,
        "ignoreerrors": False,
        "socket_timeout": _request_timeout(),
    }
    proxy = config_manager.proxy_url()
    if proxy is not None:
        ydl_opts["proxy"] = proxy
    return ydl_opts


def _extract_info(url: str) -> dict[str, Any]:
    logger.debug(f"[TitleLookup] 开始解析: {url}")
    try:
        with yt_dlp.YoutubeDL(build_ydl_options()) as ydl:
            info = ydl.extract_info(url, download=False)
    except DownloadError as exc:
        raise TitleLookupError(str(exc)) from exc
    if not isinstance(info, dict):
        raise TitleLookupError(f"yt-dlp 未返回有效元数据: {url}")
    return info


def fetch_playlist_title(playlist_id: str) -> str:
    info = _extract_info(playlist_url_for(playlist_id))
    title = str(info.get("title") or "").strip()
    if not title:
        raise TitleLookupError(f"播放列表没有标题: {playlist_id}")
    return title


def fetch_channel_name(channel_id: str) -> str:
    info = _extract_info(channel_url_for(channel_id))
    name = str(info.get("channel") or info.get("uploader") or info.get("title") or "").strip()
    if not name:
        raise TitleLookupError(f"频道没有名称: {channel_id}")
    return name


def fetch_auto_generated_title(playlist_id: str) -> str:
    """通过 YouTube Data API v3 查询合辑标题"""
    api_key = str(config_manager.get("youtube_api_key") or "").strip()
    if not api_key:
        raise TitleLookupError("未配置 youtube_api_key，无法查询自动合辑标题")

    base_url = str(config_manager.get("alternate_api_base_url") or "")
    kwargs: dict[str, Any] = {
        "params": {"part": "snippet", "id": playlist_id, "key": api_key},
        "timeout": _request_timeout(),
    }
    proxy = config_manager.proxy_url()
    if proxy is not None:
        kwargs["proxies"] = {"http": proxy, "https": proxy}

    try:
        resp = requests.get(f"{base_url}playlists", **kwargs)
        resp.raise_for_status()
        data = resp.json()
    except requests.exceptions.RequestException as exc:
        raise TitleLookupError(str(exc)) from exc
    except ValueError as exc:
        raise TitleLookupError(f"响应不是有效的 JSON: {exc}") from exc

    items = data.get("items") or []
    if not items:
        raise TitleLookupError(f"The playlist does not exist: {playlist_id}")
    title = str((items[0].get("snippet") or {}).get("title") or "").strip()
    if not title:
        raise TitleLookupError(f"合辑没有标题: {playlist_id}")
    return title


# ── 工作线程 ──────────────────────────────────────────────

class TitleLookupWorker(QThread):
    """标题查询线程"""

    finished = Signal(str)  # title
    error = Signal(str)

    def __init__(self, fetch: Callable[[str], str], source_id: str, parent=None):
        super().__init__(parent)
        self.fetch = fetch
        self.source_id = source_id

    def run(self):
        try:
            title = self.fetch(self.source_id)
        except TitleLookupError as e:
            summary, detail = parse_lookup_error(str(e))
            logger.warning(f"标题查询失败 ({self.source_id}): {summary} - {detail}")
            self.error.emit(str(e))
            return
        except Exception as e:
            logger.error(f"标题查询异常 ({self.source_id}): {e}")
            self.error.emit(str(e))
            return

        self.finished.emit(title)


class _WorkerPool:
    """
    持有运行中的工作线程，防止被提前回收

    回调以 DirectConnection 在工作线程中直接调用，不依赖 Qt 事件循环；
    已结束的线程在下次 start() 时清理。
    """

    def __init__(self) -> None:
        self._workers: set[TitleLookupWorker] = set()

    def start(
        self,
        fetch: Callable[[str], str],
        source_id: str,
        on_finished: TitleCallback,
        on_error: Callable[[str], None],
    ) -> TitleLookupWorker:
        self.prune()

        worker = TitleLookupWorker(fetch, source_id)
        worker.finished.connect(on_finished, Qt.ConnectionType.DirectConnection)
        worker.error.connect(on_error, Qt.ConnectionType.DirectConnection)
        self._workers.add(worker)
        worker.start()
        return worker

    def prune(self) -> None:
        """释放已经结束的线程"""
        self._workers = {w for w in self._workers if not w.isFinished()}


# ── 服务实现 ──────────────────────────────────────────────

class PrimaryTitleService:
    """
    标题查询主服务 (版本 A)

    播放列表标题、频道名称，失败时调用 error()。
    回调在工作线程中执行。
    """

    def __init__(self) -> None:
        self._pool = _WorkerPool()

    def get_playlist_title(
        self, *, playlist_id: str, success: TitleCallback, error: ErrorCallback
    ) -> None:
        self._pool.start(fetch_playlist_title, playlist_id, success, lambda _msg: error())

    def get_channel_name(
        self, *, channel_id: str, success: TitleCallback, error: ErrorCallback
    ) -> None:
        self._pool.start(fetch_channel_name, channel_id, success, lambda _msg: error())


class AlternateTitleService:
    """
    标题查询备用服务 (版本 B, YouTube Data API v3)

    接口只有成功回调，失败仅记录日志。
    """

    def __init__(self) -> None:
        self._pool = _WorkerPool()

    def get_auto_generated_playlist_title(self, playlist_id: str, success: TitleCallback) -> None:
        self._pool.start(fetch_auto_generated_title, playlist_id, success, self._log_failure)

    @staticmethod
    def _log_failure(message: str) -> None:
        logger.warning(f"自动合辑标题查询失败（该接口不回报错误）: {message}")


# 全局服务实例
primary_title_service = PrimaryTitleService()
alternate_title_service = AlternateTitleService()
