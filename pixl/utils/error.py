"""
pixl 基础异常

构造异常时即写日志，调试模式下附带调用栈。
"""

import logging
import sys
import traceback

from pixl.utils.logger import get_log

LOG = get_log("Error")


class PixlError(Exception):
    """pixl 所有异常的基类"""

    logger: logging.Logger = LOG
    log_level: int = logging.ERROR

    def __init__(self, info: str, log: bool = True):
        from pixl.utils.config import pixl_config

        self.info = info
        if log:
            self.logger.log(self.log_level, f"{type(self).__name__}: {info}")
            if pixl_config.debug:
                # 检查是否有活动的异常上下文
                if sys.exc_info()[0] is not None:
                    self.logger.debug(f"stacktrace:\n{traceback.format_exc()}")
                else:
                    self.logger.debug(f"stacktrace:\n{''.join(traceback.format_stack()[:-1])}")
        super().__init__(info)


class PixlValueError(PixlError, ValueError):
    """取值非法"""

    def __init__(self, info: str, log: bool = True):
        super().__init__(f"值错误: {info}", log=log)
