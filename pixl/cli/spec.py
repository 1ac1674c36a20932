"""
参数声明

包含：
- ArgumentSpec: 单个标志的声明，形如 -x [value]
- SubcommandSpec: 归属于某个子命令的一组参数声明（类似 git log / git commit）
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from pixl.utils import get_log, PixlError
from .errors import DuplicateRegistrationError
from .lookup import find_argument

LOG = get_log("CliSpec")

__all__ = ["ArgumentSpec", "SubcommandSpec"]


@dataclass(frozen=True)
class ArgumentSpec:
    """
    单个标志的声明

    Attributes:
        name: 标志名，不含前缀字符（-f 的 name 为 "f"）
        description: 描述文本
        takes_value: 是否需要紧随一个取值
        required: 是否为必需参数
    """

    name: str
    description: str = ""
    takes_value: bool = False
    required: bool = False

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("参数名不能为空")
        if any(ch.isspace() for ch in self.name):
            raise ValueError(f"参数名不能包含空白字符: {self.name!r}")


class SubcommandSpec:
    """
    子命令声明

    必须紧跟在程序名之后出现。子命令独占其参数声明，解析器通过只读的
    arguments 视图读取它们。

    使用示例：
        ```python
        resize = SubcommandSpec("resize")
        resize.add_argument(ArgumentSpec("i", "输入文件", takes_value=True, required=True))
        parser.add_subcommand(resize)
        ```
    """

    def __init__(self, name: str, arguments: Iterable[ArgumentSpec] = (), description: str = ""):
        if not isinstance(name, str) or not name:
            raise ValueError("子命令名不能为空")
        self.name = name
        self.description = description
        self._arguments: List[ArgumentSpec] = []
        self._frozen = False
        for spec in arguments:
            self.add_argument(spec)

    @property
    def arguments(self) -> Tuple[ArgumentSpec, ...]:
        """该子命令的参数声明（按注册顺序，只读）"""
        return tuple(self._arguments)

    def add_argument(self, spec: ArgumentSpec) -> ArgumentSpec:
        """为子命令添加一个参数声明"""
        if self._frozen:
            raise PixlError(f"子命令 {self.name} 已被解析器使用，不能再注册参数")
        if find_argument(self._arguments, spec.name) is not None:
            raise DuplicateRegistrationError("参数", spec.name, f"子命令 {self.name}")
        self._arguments.append(spec)
        LOG.debug(f"子命令 {self.name} 注册参数 {spec.name}")
        return spec

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """冻结参数声明，解析器开始解析时调用"""
        self._frozen = True

    def find_argument(self, name: str) -> Optional[ArgumentSpec]:
        return find_argument(self._arguments, name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find_argument(name) is not None

    def __iter__(self) -> Iterator[ArgumentSpec]:
        return iter(self._arguments)

    def __len__(self) -> int:
        return len(self._arguments)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SubcommandSpec):
            return NotImplemented
        return self.name == other.name and self._arguments == other._arguments

    def __repr__(self) -> str:
        return f"SubcommandSpec({self.name!r}, {len(self._arguments)} args)"
