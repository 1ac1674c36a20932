"""pixl 测试公共夹具"""

import pytest

from pixl.cli import ArgumentSpec, Parser, SubcommandSpec
from pixl.utils import pixl_config, setup_logging


@pytest.fixture(autouse=True)
def _reset_config():
    """每个测试结束后恢复全局配置"""
    yield
    pixl_config.reset()
    setup_logging()


@pytest.fixture
def flat_parser():
    """-f (裸标志) 与 -o (带值, 必需)"""
    parser = Parser()
    parser.add_argument(ArgumentSpec("f", "强制覆盖"))
    parser.add_argument(ArgumentSpec("o", "输出文件", takes_value=True, required=True))
    return parser


def build_sub_parser() -> Parser:
    parser = Parser()
    parser.add_argument(ArgumentSpec("y", "顶层参数", takes_value=True))
    sub = SubcommandSpec("sub")
    sub.add_argument(ArgumentSpec("x", "子命令参数", takes_value=True, required=True))
    sub.add_argument(ArgumentSpec("q", "安静模式"))
    parser.add_subcommand(sub)
    return parser


@pytest.fixture
def sub_parser():
    """顶层 -y，子命令 sub 下 -x (带值, 必需) 与 -q"""
    return build_sub_parser()


@pytest.fixture
def make_sub_parser():
    """返回构造函数，便于得到配置相同的全新解析器"""
    return build_sub_parser
