from __future__ import annotations

import sys
import tempfile
from pathlib import Path

from loguru import logger

from .paths import log_dir

# 1. 确定日志存储路径
LOG_DIR = log_dir()

try:
    LOG_DIR.mkdir(parents=True, exist_ok=True)
except OSError:
    # 无权限创建目录，降级为临时目录
    LOG_DIR = Path(tempfile.gettempdir()) / "ytsource_logs"
    LOG_DIR.mkdir(parents=True, exist_ok=True)


# 2. 重置 logger 配置
logger.remove()


# 3. 控制台输出
_console_sink = getattr(sys, "__stderr__", None) or sys.stderr
if _console_sink is not None:
    logger.add(
        _console_sink,
        level="INFO",
        format=(
            "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
        ),
    )


# 4. 文件输出
# rotation="00:00" 每天午夜轮转，retention 只保留最近 7 天
logger.add(
    str(LOG_DIR / "ytsource_{time:YYYY-MM-DD}.log"),
    level="DEBUG",
    rotation="00:00",
    retention="7 days",
    encoding="utf-8",
    enqueue=True,
    backtrace=True,
)
