"""解析结果"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from .errors import ParseError
from .spec import ArgumentSpec, SubcommandSpec

__all__ = ["ParsedArgument", "ParseResult"]


@dataclass
class ParsedArgument:
    """一次已解析的匹配：参数声明 + 取值"""

    spec: ArgumentSpec
    value: Optional[str] = None

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def has_value(self) -> bool:
        return self.value is not None


@dataclass
class ParseResult:
    """
    解析器输出

    matched_arguments 与 error 二者只有一个有意义：出错时匹配列表被清空，
    不存在部分成功的结果。
    """

    matched_arguments: List[ParsedArgument] = field(default_factory=list)
    subcommand: Optional[SubcommandSpec] = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_message(self) -> str:
        return self.error.message if self.error is not None else ""

    def get_argument(self, name: str) -> Optional[ParsedArgument]:
        """按名称查找第一个匹配"""
        for parsed in self.matched_arguments:
            if parsed.name == name:
                return parsed
        return None

    def get_value(self, name: str, default: Optional[str] = None) -> Optional[str]:
        parsed = self.get_argument(name)
        if parsed is None or parsed.value is None:
            return default
        return parsed.value

    def get_values(self, name: str) -> List[Optional[str]]:
        """某个参数的全部取值（重复出现时有多个）"""
        return [parsed.value for parsed in self.matched_arguments if parsed.name == name]

    def has(self, name: str) -> bool:
        return self.get_argument(name) is not None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def record(self, parsed: ParsedArgument) -> None:
        self.matched_arguments.append(parsed)

    def fail(self, error: ParseError) -> "ParseResult":
        """记录错误并丢弃已匹配内容"""
        self.error = error
        self.matched_arguments.clear()
        return self

    def raise_for_error(self) -> "ParseResult":
        if self.error is not None:
            raise self.error
        return self

    def to_dict(self) -> Dict[str, Union[str, bool, List[Any]]]:
        """
        转换为 name -> value 映射

        无取值的标志映射为 True；重复出现的参数映射为取值列表。
        """
        data: Dict[str, Any] = {}
        for parsed in self.matched_arguments:
            value: Any = parsed.value if parsed.has_value else True
            if parsed.name in data:
                previous = data[parsed.name]
                data[parsed.name] = previous + [value] if isinstance(previous, list) else [previous, value]
            else:
                data[parsed.name] = value
        return data
