"""
pixl 程序入口

解析器本身从不退出进程：这里负责把解析失败转换为错误输出与非零退出码。
图像的读写由外部编解码组件完成，不在本包内。
"""

import sys
from typing import List, Optional, Sequence

from pixl.utils import get_log, pixl_config, setup_logging
from pixl.version import __version__
from .errors import ParseError
from .parser import Parser
from .result import ParseResult
from .spec import ArgumentSpec, SubcommandSpec

LOG = get_log("App")

EXIT_OK = 0
EXIT_USAGE = 2


def build_parser() -> Parser:
    """构建 pixl 程序的命令语法"""
    parser = Parser()
    parser.add_argument(ArgumentSpec("v", "输出详细日志"))
    parser.add_argument(ArgumentSpec("V", "显示版本号"))

    resize = SubcommandSpec("resize", description="缩放图像")
    resize.add_argument(ArgumentSpec("i", "输入文件", takes_value=True, required=True))
    resize.add_argument(ArgumentSpec("o", "输出文件", takes_value=True, required=True))
    resize.add_argument(ArgumentSpec("w", "目标宽度", takes_value=True))
    resize.add_argument(ArgumentSpec("h", "目标高度", takes_value=True))
    resize.add_argument(ArgumentSpec("v", "输出详细日志"))
    parser.add_subcommand(resize)

    convert = SubcommandSpec("convert", description="转换图像格式")
    convert.add_argument(ArgumentSpec("i", "输入文件", takes_value=True, required=True))
    convert.add_argument(ArgumentSpec("o", "输出文件", takes_value=True, required=True))
    convert.add_argument(ArgumentSpec("q", "编码质量", takes_value=True))
    convert.add_argument(ArgumentSpec("v", "输出详细日志"))
    parser.add_subcommand(convert)

    info = SubcommandSpec("info", description="显示图像信息")
    info.add_argument(ArgumentSpec("i", "输入文件", takes_value=True, required=True))
    info.add_argument(ArgumentSpec("v", "输出详细日志"))
    parser.add_subcommand(info)
    return parser


def describe(result: ParseResult) -> str:
    """把解析结果渲染为单行文本"""
    parts: List[str] = []
    if result.subcommand is not None:
        parts.append(result.subcommand.name)
    for parsed in result.matched_arguments:
        parts.append(f"{parsed.name}={parsed.value}" if parsed.has_value else parsed.name)
    return " ".join(parts)


def main(argv: Optional[Sequence[str]] = None) -> int:
    tokens = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()
    try:
        result = parser.parse(tokens)
    except ParseError as e:
        print(f"pixl: {e.message}", file=sys.stderr)
        return EXIT_USAGE

    if result.has("v"):
        pixl_config.update_value("log_level", "DEBUG")
        setup_logging()
    if result.has("V"):
        print(f"pixl {__version__}")
        return EXIT_OK

    LOG.debug(f"解析结果: {result.to_dict()}")
    print(describe(result))
    return EXIT_OK
