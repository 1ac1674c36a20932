"""
日志工具

所有模块通过 get_log(name) 获取 pixl 命名空间下的 logger。
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "pixl"
LOG_FORMAT = "[%(asctime)s] %(levelname)-8s %(name)s | %(message)s"
DATE_FORMAT = "%H:%M:%S"

_configured = False


def _resolve_level(level: Optional[str] = None) -> int:
    """从配置解析日志级别"""
    from pixl.utils.config import pixl_config

    if pixl_config.debug:
        return logging.DEBUG
    value = logging.getLevelName((level or pixl_config.log_level).upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(level: Optional[str] = None, force: bool = False) -> logging.Logger:
    """
    配置 pixl 根 logger

    只安装一次 StreamHandler，重复调用仅更新级别。

    Args:
        level: 日志级别名称，为空时读取 pixl_config.log_level
        force: 为 True 时重新安装 handler
    """
    global _configured
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(_resolve_level(level))

    if force:
        for handler in list(root.handlers):
            root.removeHandler(handler)
        _configured = False

    if not _configured:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        root.addHandler(handler)
        _configured = True
    return root


def get_log(name: Optional[str] = None) -> logging.Logger:
    """获取 pixl 命名空间下的 logger"""
    if not _configured:
        setup_logging()
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
