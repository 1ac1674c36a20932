"""命令子系统

git 风格的命令行参数解析：顶层标志或"子命令 + 标志"。
"""

from .errors import (
    ParseErrorKind,
    ParseError,
    NoArgumentsError,
    MalformedTokenError,
    UnknownArgumentError,
    ArgumentExpectsValueError,
    ArgumentUnexpectedValueError,
    MissingRequiredArgumentError,
    DuplicateArgumentError,
    DuplicateRegistrationError,
)
from .lookup import find_argument, find_subcommand
from .parser import FlagToken, Parser, ParserOptions, parse_tokens, scan_tokens
from .result import ParsedArgument, ParseResult
from .spec import ArgumentSpec, SubcommandSpec

__all__ = [
    "ArgumentSpec",
    "SubcommandSpec",
    "ParsedArgument",
    "ParseResult",
    "Parser",
    "ParserOptions",
    "FlagToken",
    "parse_tokens",
    "scan_tokens",
    "find_argument",
    "find_subcommand",
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
