"""
命令行解析器

支持两种调用形式：
- 普通形式: program -f -o out.txt
- 子命令形式: program resize -i in.png -o out.png

第一个词若与已注册子命令同名，则当前作用域替换为该子命令的参数声明，
其余词按该作用域解析；否则全部按顶层参数声明解析。

扫描时只向前看一个词：标志之后若紧跟一个非标志的词，二者组成
"带值标志"；否则为"裸标志"。标志是否真的接受取值留到解析阶段判断，
因此一个不接受取值的标志后面跟着取值会直接报错，而不是把取值吞掉。
"""

from typing import Iterable, Iterator, List, NamedTuple, Optional, Sequence, Tuple, TypedDict, Union

from typing_extensions import Unpack

from pixl.utils import get_log, pixl_config, PixlConfig, PixlError, DuplicatePolicy
from .errors import (
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
from .lookup import find_argument, find_subcommand, is_flag, strip_prefix
from .result import ParsedArgument, ParseResult
from .spec import ArgumentSpec, SubcommandSpec

LOG = get_log("CliParser")

__all__ = [
    "FlagToken",
    "ParserOptions",
    "LEGAL_OPTIONS",
    "Parser",
    "scan_tokens",
    "parse_tokens",
]


class FlagToken(NamedTuple):
    """扫描得到的一个标志，value 为 None 表示裸标志"""

    name: str
    value: Optional[str] = None


class ParserOptions(TypedDict, total=False):
    """解析器选项，覆盖全局 pixl_config 中的同名项"""

    flag_prefix: str
    duplicate_policy: Union[DuplicatePolicy, str]


LEGAL_OPTIONS = ParserOptions.__annotations__.keys()


# =============================================================================
# 纯函数实现
# =============================================================================


def scan_tokens(tokens: Sequence[str], prefix: str = "-") -> Iterator[FlagToken]:
    """
    从左到右扫描词序列

    惰性产出 FlagToken，遇到既不是标志、也未被前一个标志当作取值的词时
    抛出 MalformedTokenError。调用方在解析出错时停止迭代，后续的词不会再被扫描。
    """
    i = 0
    count = len(tokens)
    while i < count:
        token = tokens[i]
        if is_flag(token, prefix) and i + 1 < count and not is_flag(tokens[i + 1], prefix):
            name, value = strip_prefix(token, prefix), tokens[i + 1]
            LOG.debug(f"带值标志: {name} = {value!r}")
            yield FlagToken(name, value)
            i += 2
        elif is_flag(token, prefix):
            name = strip_prefix(token, prefix)
            LOG.debug(f"裸标志: {name}")
            yield FlagToken(name)
            i += 1
        else:
            raise MalformedTokenError(token)


def _resolve(
    flag: FlagToken,
    scope: Sequence[ArgumentSpec],
    result: ParseResult,
    duplicate_policy: DuplicatePolicy,
) -> None:
    spec = find_argument(scope, flag.name)
    if spec is None:
        raise UnknownArgumentError(flag.name)
    if flag.value is None and spec.takes_value:
        raise ArgumentExpectsValueError(flag.name)
    if flag.value is not None and not spec.takes_value:
        raise ArgumentUnexpectedValueError(flag.name, flag.value)

    parsed = ParsedArgument(spec, flag.value)
    existing = result.get_argument(spec.name)
    if existing is None or duplicate_policy is DuplicatePolicy.APPEND:
        result.record(parsed)
    elif duplicate_policy is DuplicatePolicy.LAST:
        # 保持首次出现的位置，取最后一次的值
        index = result.matched_arguments.index(existing)
        result.matched_arguments[index] = parsed
    else:
        raise DuplicateArgumentError(spec.name)


def _parse_into(
    result: ParseResult,
    tokens: Sequence[str],
    arguments: Sequence[ArgumentSpec],
    subcommands: Sequence[SubcommandSpec],
    flag_prefix: str,
    duplicate_policy: DuplicatePolicy,
) -> ParseResult:
    if not tokens:
        raise NoArgumentsError()

    scope = arguments
    remaining = tokens
    subcommand = find_subcommand(subcommands, tokens[0])
    if subcommand is not None:
        LOG.debug(f"处理子命令 {subcommand.name}")
        result.subcommand = subcommand
        # 作用域被替换而不是合并
        scope = subcommand.arguments
        remaining = tokens[1:]

    for flag in scan_tokens(remaining, flag_prefix):
        _resolve(flag, scope, result, duplicate_policy)

    for spec in scope:
        if spec.required and not result.has(spec.name):
            raise MissingRequiredArgumentError(spec.name)

    return result


def parse_tokens(
    tokens: Sequence[str],
    arguments: Iterable[ArgumentSpec],
    subcommands: Iterable[SubcommandSpec] = (),
    *,
    flag_prefix: str = "-",
    duplicate_policy: Union[DuplicatePolicy, str] = DuplicatePolicy.APPEND,
) -> ParseResult:
    """
    按给定的注册表解析词序列

    Args:
        tokens: 程序名之后的全部词
        arguments: 顶层参数声明
        subcommands: 子命令声明
        flag_prefix: 标志前缀字符
        duplicate_policy: 同一标志重复出现时的策略

    Returns:
        ParseResult: 解析结果

    Raises:
        ParseError: 任一步骤失败时立即抛出，不返回部分结果
    """
    return _parse_into(
        ParseResult(),
        list(tokens),
        tuple(arguments),
        tuple(subcommands),
        flag_prefix,
        DuplicatePolicy(duplicate_policy),
    )


# =============================================================================
# 解析器
# =============================================================================


class Parser:
    """
    命令行解析器

    先注册参数与子命令，再调用 parse。首次解析后注册表即被冻结。
    解析器只从 config 中读取 flag_prefix 与 duplicate_policy，
    调试栈与日志级别由全局 pixl_config 控制。

    使用示例：
        ```python
        parser = Parser()
        parser.add_argument(ArgumentSpec("f", "强制覆盖"))
        parser.add_argument(ArgumentSpec("o", "输出文件", takes_value=True, required=True))

        result = parser.parse(["-f", "-o", "out.txt"])
        result.get_value("o")  # "out.txt"
        ```
    """

    def __init__(self, config: Optional[PixlConfig] = None, **options: Unpack[ParserOptions]):
        self.config = (config if config is not None else pixl_config).model_copy()
        for key, value in options.items():
            if key not in LEGAL_OPTIONS:
                raise PixlError(f"非法解析器选项: {key}")
            if value is not None:
                self.config.update_value(key, value)

        self._arguments: List[ArgumentSpec] = []
        self._subcommands: List[SubcommandSpec] = []
        self._frozen = False

    @property
    def flag_prefix(self) -> str:
        return self.config.flag_prefix

    @property
    def duplicate_policy(self) -> DuplicatePolicy:
        return DuplicatePolicy(self.config.duplicate_policy)

    @property
    def arguments(self) -> Tuple[ArgumentSpec, ...]:
        """顶层参数声明（只读）"""
        return tuple(self._arguments)

    @property
    def subcommands(self) -> Tuple[SubcommandSpec, ...]:
        """子命令声明（只读）"""
        return tuple(self._subcommands)

    # -------------------------------------------------------------------------
    # 注册
    # -------------------------------------------------------------------------

    def _check_mutable(self) -> None:
        if self._frozen:
            raise PixlError("解析开始后不能再注册参数或子命令")

    def _check_name(self, spec: ArgumentSpec, scope: str) -> None:
        if spec.name.startswith(self.flag_prefix):
            raise PixlError(f"{scope} 中参数名 {spec.name!r} 不能以前缀 {self.flag_prefix!r} 开头")

    def add_argument(self, spec: ArgumentSpec) -> ArgumentSpec:
        """注册一个顶层参数"""
        self._check_mutable()
        self._check_name(spec, "顶层")
        if find_argument(self._arguments, spec.name) is not None:
            raise DuplicateRegistrationError("参数", spec.name, "顶层")
        self._arguments.append(spec)
        LOG.debug(f"注册参数 {spec.name}")
        return spec

    def add_subcommand(self, spec: SubcommandSpec) -> SubcommandSpec:
        """注册一个子命令"""
        self._check_mutable()
        if find_subcommand(self._subcommands, spec.name) is not None:
            raise DuplicateRegistrationError("子命令", spec.name, "解析器")
        self._subcommands.append(spec)
        LOG.debug(f"注册子命令 {spec.name}")
        return spec

    def find_argument(self, name: str) -> Optional[ArgumentSpec]:
        return find_argument(self._arguments, name)

    def find_subcommand(self, name: str) -> Optional[SubcommandSpec]:
        return find_subcommand(self._subcommands, name)

    # -------------------------------------------------------------------------
    # 解析
    # -------------------------------------------------------------------------

    def _freeze(self) -> None:
        if self._frozen:
            return
        # 子命令的参数可能在注册子命令之后才添加，冻结时统一检查
        for sub in self._subcommands:
            for spec in sub.arguments:
                self._check_name(spec, f"子命令 {sub.name}")
        for sub in self._subcommands:
            sub.freeze()
        self._frozen = True

    def parse(self, tokens: Sequence[str]) -> ParseResult:
        """
        解析程序名之后的全部词

        Raises:
            ParseError: 解析失败
        """
        self._freeze()
        return _parse_into(
            ParseResult(),
            list(tokens),
            self._arguments,
            self._subcommands,
            self.flag_prefix,
            self.duplicate_policy,
        )

    def try_parse(self, tokens: Sequence[str]) -> ParseResult:
        """解析失败时不抛出异常，错误记录在 result.error 中"""
        self._freeze()
        result = ParseResult()
        try:
            _parse_into(
                result,
                list(tokens),
                self._arguments,
                self._subcommands,
                self.flag_prefix,
                self.duplicate_policy,
            )
        except ParseError as e:
            LOG.debug(f"解析失败: {e.message}")
            result.fail(e)
        return result
