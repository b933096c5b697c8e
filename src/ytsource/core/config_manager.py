from __future__ import annotations

import json
from typing import Any

from ..utils.paths import config_path


class ConfigManager:
    """配置管理单例（JSON 持久化）。"""

    _instance: "ConfigManager | None" = None

    DEFAULT_CONFIG: dict[str, Any] = {
        # 列表抓取的基础地址，频道/收藏/播放列表的 listing URL 都拼接在其后
        "listing_base_url": "https://gdata.youtube.com/feeds/api/",
        # YouTube Data API v3 (自动生成的合辑标题查询)
        # 空代表不启用，此时合辑标题查询只会记录警告
        "youtube_api_key": "",
        "alternate_api_base_url": "https://www.googleapis.com/youtube/v3/",
        # 单次标题查询的网络超时（秒）
        "title_request_timeout": 10,
        # Proxy mode:
        # - off: do NOT use system/ambient proxy
        # - system: follow system/ambient proxy settings
        # - http: manual HTTP proxy (proxy_url is host:port or URL)
        # - socks5: manual SOCKS5 proxy (proxy_url is host:port or URL)
        "proxy_mode": "system",
        "proxy_url": "127.0.0.1:7890",
    }

    def __new__(cls) -> "ConfigManager":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._init()
        return cls._instance

    def _init(self) -> None:
        self.config_file = config_path()
        self.config: dict[str, Any] = self._load_config()

    def _load_config(self) -> dict[str, Any]:
        if not self.config_file.exists():
            return self.DEFAULT_CONFIG.copy()

        try:
            data = json.loads(self.config_file.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return self.DEFAULT_CONFIG.copy()
        if not isinstance(data, dict):
            return self.DEFAULT_CONFIG.copy()

        # 合并默认配置，防止新版本缺字段
        merged = {**self.DEFAULT_CONFIG, **data}

        pm = str(merged.get("proxy_mode") or "off").lower().strip()
        if pm not in {"off", "system", "http", "socks5"}:
            pm = "off"
        merged["proxy_mode"] = pm

        base = str(merged.get("listing_base_url") or "").strip()
        if base and not base.endswith("/"):
            base += "/"
        merged["listing_base_url"] = base or self.DEFAULT_CONFIG["listing_base_url"]

        return merged

    def get(self, key: str, default: Any = None) -> Any:
        return self.config.get(key, default)

    def proxy_url(self) -> str | None:
        """按 proxy_mode 解析出实际使用的代理地址。

        Returns:
            None 表示沿用系统代理；空字符串表示显式禁用代理。
        """
        proxy_mode = str(self.get("proxy_mode") or "off").lower().strip()
        raw = str(self.get("proxy_url") or "").strip()
        if proxy_mode == "system":
            return None
        if proxy_mode == "off" or not raw:
            return ""
        lower = raw.lower()
        if lower.startswith(("http://", "https://", "socks5://")):
            return raw
        scheme = "socks5" if proxy_mode == "socks5" else "http"
        return f"{scheme}://{raw}"


config_manager = ConfigManager()
