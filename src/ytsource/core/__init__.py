"""
ytsource 核心基础设施层

仅包含跨功能域共享的基础设施服务（配置）。
"""

from .config_manager import ConfigManager, config_manager

__all__ = [
    "ConfigManager",
    "config_manager",
]
