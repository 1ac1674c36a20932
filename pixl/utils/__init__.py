"""pixl 工具包"""

from pixl.utils.config import pixl_config, PixlConfig, DuplicatePolicy
from pixl.utils.config import pixl_config as config
from pixl.utils.logger import get_log, setup_logging
from pixl.utils.error import PixlError, PixlValueError

__all__ = [
    "pixl_config", "config", "PixlConfig", "DuplicatePolicy",
    "get_log", "setup_logging",
    "PixlError", "PixlValueError",
]
