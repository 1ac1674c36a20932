"""
命令行解析错误

所有解析错误均为快速失败、不可重试，message 原样展示给调用方。
"""

import logging
from enum import Enum
from typing import Optional

from pixl.utils import get_log, PixlError, PixlValueError

LOG = get_log("CliParser")

__all__ = [
    "ParseErrorKind",
    "ParseError",
    "NoArgumentsError",
    "MalformedTokenError",
    "UnknownArgumentError",
    "ArgumentExpectsValueError",
    "ArgumentUnexpectedValueError",
    "MissingRequiredArgumentError",
    "DuplicateArgumentError",
    "DuplicateRegistrationError",
]


class ParseErrorKind(str, Enum):
    NO_ARGUMENTS = "no_arguments"
    MALFORMED_TOKEN = "malformed_token"
    UNKNOWN_ARGUMENT = "unknown_argument"
    ARGUMENT_EXPECTS_VALUE = "argument_expects_value"
    ARGUMENT_UNEXPECTED_VALUE = "argument_unexpected_value"
    MISSING_REQUIRED_ARGUMENT = "missing_required_argument"
    DUPLICATE_ARGUMENT = "duplicate_argument"


class ParseError(PixlError):
    """解析错误基类"""

    logger = LOG
    # 用户输入错误，不按 ERROR 级别记录
    log_level = logging.DEBUG
    kind: ParseErrorKind

    def __init__(
        self,
        message: str,
        argument: Optional[str] = None,
        token: Optional[str] = None,
    ):
        self.message = message
        self.argument = argument
        self.token = token
        super().__init__(message)

    def __reduce__(self):
        # 子类构造参数与 self.args 不一致，按字段重建
        return (_restore_parse_error, (type(self), self.message, self.argument, self.token))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.message == other.message
            and self.argument == other.argument
            and self.token == other.token
        )

    def __hash__(self) -> int:
        return hash((type(self), self.message, self.argument, self.token))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class NoArgumentsError(ParseError):
    kind = ParseErrorKind.NO_ARGUMENTS

    def __init__(self):
        super().__init__("未提供任何参数")


class MalformedTokenError(ParseError):
    kind = ParseErrorKind.MALFORMED_TOKEN

    def __init__(self, token: str):
        super().__init__(f"无法识别的输入: {token!r}", token=token)


class UnknownArgumentError(ParseError):
    kind = ParseErrorKind.UNKNOWN_ARGUMENT

    def __init__(self, name: str):
        super().__init__(f"未知参数: {name}", argument=name)


class ArgumentExpectsValueError(ParseError):
    kind = ParseErrorKind.ARGUMENT_EXPECTS_VALUE

    def __init__(self, name: str):
        super().__init__(f"参数 {name} 必须带有取值", argument=name)


class ArgumentUnexpectedValueError(ParseError):
    kind = ParseErrorKind.ARGUMENT_UNEXPECTED_VALUE

    def __init__(self, name: str, value: str):
        super().__init__(f"参数 {name} 不能带有取值 (收到 {value!r})", argument=name, token=value)


class MissingRequiredArgumentError(ParseError):
    kind = ParseErrorKind.MISSING_REQUIRED_ARGUMENT

    def __init__(self, name: str):
        super().__init__(f"缺少必需参数: {name}", argument=name)


class DuplicateArgumentError(ParseError):
    kind = ParseErrorKind.DUPLICATE_ARGUMENT

    def __init__(self, name: str):
        super().__init__(f"参数 {name} 重复出现", argument=name)


class DuplicateRegistrationError(PixlValueError):
    """同一作用域内重复注册同名参数或子命令"""

    def __init__(self, what: str, name: str, scope: str):
        self.name = name
        self.scope = scope
        super().__init__(f"{scope} 中{what} {name} 已存在")


def _restore_parse_error(
    cls: type,
    message: str,
    argument: Optional[str],
    token: Optional[str],
) -> ParseError:
    """反序列化时重建解析错误，不再次写日志"""
    error = cls.__new__(cls)
    Exception.__init__(error, message)
    error.info = message
    error.message = message
    error.argument = argument
    error.token = token
    return error
