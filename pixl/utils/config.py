"""
运行时配置

pixl_config 为进程内唯一的引擎配置实例，只描述解析引擎自身的行为
（标志前缀、重复标志策略、日志），不承载任何命令行参数取值。
"""

from enum import Enum
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

__all__ = ["DuplicatePolicy", "PixlConfig", "pixl_config"]

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class DuplicatePolicy(str, Enum):
    """同一标志重复出现时的处理策略"""

    APPEND = "append"  # 追加一条新匹配（多值）
    LAST = "last"  # 覆盖先前匹配的值，保持首次出现的位置
    REJECT = "reject"  # 直接报错


class PixlConfig(BaseModel):
    """
    解析引擎配置

    flag_prefix 与 duplicate_policy 可由每个 Parser 单独覆盖；
    debug 与 log_level 作用于整个进程，只读取全局 pixl_config。
    """

    model_config = ConfigDict(validate_assignment=True, use_enum_values=False)

    flag_prefix: str = "-"
    duplicate_policy: DuplicatePolicy = DuplicatePolicy.APPEND
    debug: bool = False
    log_level: str = "INFO"

    @field_validator("flag_prefix")
    def _check_prefix(cls, v: str) -> str:
        if len(v) != 1 or v.isalnum() or v.isspace():
            raise ValueError(f"标志前缀必须是单个非字母数字字符: {v!r}")
        return v

    @field_validator("log_level", mode="before")
    def _check_level(cls, v: Any) -> str:
        level = str(v).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"未知日志级别: {v!r}")
        return level

    # -------------------------------------------------------------------------
    # 读写
    # -------------------------------------------------------------------------

    def update_value(self, key: str, value: Any) -> None:
        """更新单个配置项"""
        from pixl.utils.error import PixlError

        if key not in type(self).model_fields:
            raise PixlError(f"非法配置项: {key}")
        try:
            setattr(self, key, value)
        except ValidationError as e:
            raise PixlError(f"配置项 {key} 取值非法: {e.errors()[0]['msg']}") from e

    def update_from_dict(self, data: Dict[str, Any]) -> None:
        """批量更新配置"""
        for key, value in data.items():
            if value is not None:
                self.update_value(key, value)

    def validate_config(self) -> None:
        """整体校验当前配置"""
        from pixl.utils.error import PixlError

        try:
            type(self).model_validate(self.model_dump())
        except ValidationError as e:
            raise PixlError(f"配置校验失败: {e}") from e

    def reset(self) -> None:
        """恢复默认值"""
        defaults = type(self)()
        for key in type(self).model_fields:
            setattr(self, key, getattr(defaults, key))

    @classmethod
    def load(cls, path: Union[str, Path]) -> "PixlConfig":
        """从 YAML 文件读取引擎配置，文件不存在时返回默认配置"""
        from pixl.utils.error import PixlError

        path = Path(path)
        if not path.exists():
            return cls()
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f.read()) or {}
        section = data.get("pixl", data) if isinstance(data, dict) else None
        if not isinstance(section, dict):
            raise PixlError(f"配置文件格式错误: {path}")
        config = cls()
        config.update_from_dict(section)
        return config


pixl_config = PixlConfig()
