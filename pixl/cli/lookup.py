"""
查找与词法辅助函数

所有函数显式接收注册表与前缀，不依赖任何进程级状态。
"""

from typing import TYPE_CHECKING, Iterable, Optional

if TYPE_CHECKING:
    from .spec import ArgumentSpec, SubcommandSpec

__all__ = ["find_argument", "find_subcommand", "is_flag", "strip_prefix"]


def find_argument(arguments: Iterable["ArgumentSpec"], name: str) -> Optional["ArgumentSpec"]:
    """线性查找，返回第一个同名参数声明，未找到返回 None"""
    for spec in arguments:
        if spec.name == name:
            return spec
    return None


def find_subcommand(subcommands: Iterable["SubcommandSpec"], name: str) -> Optional["SubcommandSpec"]:
    """线性查找，返回第一个同名子命令，未找到返回 None"""
    for sub in subcommands:
        if sub.name == name:
            return sub
    return None


def is_flag(token: str, prefix: str = "-") -> bool:
    return token.startswith(prefix)


def strip_prefix(token: str, prefix: str = "-") -> str:
    """去掉一个前缀字符得到标志名（--x 的标志名为 -x）"""
    return token[len(prefix):] if token.startswith(prefix) else token
