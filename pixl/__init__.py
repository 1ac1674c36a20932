"""pixl 命令行参数解析引擎"""

from pixl.version import __version__
from pixl.cli import (
    ArgumentSpec,
    SubcommandSpec,
    Parser,
    ParseResult,
    ParseError,
    parse_tokens,
)

__all__ = [
    "__version__",
    "ArgumentSpec",
    "SubcommandSpec",
    "Parser",
    "ParseResult",
    "ParseError",
    "parse_tokens",
]
