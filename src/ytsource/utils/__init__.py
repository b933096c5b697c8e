"""
ytsource 通用工具

日志、路径、错误文本解析。
"""

from .error_parser import parse_lookup_error
from .logger import logger

__all__ = [
    "logger",
    "parse_lookup_error",
]
