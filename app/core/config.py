# app/core/config.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple

# Python 3.11+ 用 tomllib；3.10 可用 tomli 替代
import tomli as tomllib

from core.errors import ConfigurationError
from utils.human_size import parse_size

BOUND_KEYS = (
    "less_than",
    "less_than_or_equal_to",
    "greater_than",
    "greater_than_or_equal_to",
    "between",
)


@dataclass(frozen=True)
class ServerConfig:
    # 日志级别（DEBUG, INFO, WARNING, ERROR）
    log_level: str = "INFO"
    version: str = "1.0.0"


@dataclass(frozen=True)
class SizeRuleConfig:
    attribute: str
    # 恰好一个边界：("less_than", 2097152) / ("between", (1024, 4096))
    bound: Tuple[str, Any]
    message: str | None = None

    def to_options(self) -> Dict[str, Any]:
        options: Dict[str, Any] = {self.bound[0]: self.bound[1]}
        if self.message:
            options["message"] = self.message
        return options


@dataclass(frozen=True)
class AppConfig:
    server: ServerConfig = ServerConfig()
    rules: List[SizeRuleConfig] = field(default_factory=list)


def _get_table(d: Dict[str, Any], key: str) -> Dict[str, Any]:
    v = d.get(key, {})
    return v if isinstance(v, dict) else {}


def _parse_bound_value(key: str, value: Any) -> Any:
    try:
        if key == "between":
            if not isinstance(value, list) or len(value) != 2:
                raise ConfigurationError(f"rules.between must be a [min, max] array, got {value!r}", option=key)
            return parse_size(value[0]), parse_size(value[1])
        return parse_size(value)
    except ValueError as e:
        if isinstance(e, ConfigurationError):
            raise
        raise ConfigurationError(f"rules.{key}: {e}", option=key) from e


def _parse_rule(index: int, raw: Dict[str, Any]) -> SizeRuleConfig:
    attribute = raw.get("attribute")
    if not isinstance(attribute, str) or not attribute:
        raise ConfigurationError(f"rules[{index}].attribute is required")

    keys = [k for k in BOUND_KEYS if k in raw]
    if len(keys) != 1:
        raise ConfigurationError(
            f"rules[{index}] ({attribute}) must set exactly one of {', '.join(BOUND_KEYS)}"
        )

    key = keys[0]
    message = raw.get("message")
    return SizeRuleConfig(
        attribute=attribute,
        bound=(key, _parse_bound_value(key, raw[key])),
        message=str(message) if message is not None else None,
    )


def load_config(path: str | Path = "config.toml") -> AppConfig:
    """
    从 config.toml 读取配置。
    - 缺失字段使用 dataclass 默认值
    - [[rules]] 每条规则对应一个附件属性的大小校验
    - 大小可写整数（字节）或带单位字符串（"2MB"）
    """
    p = Path(path)
    raw = tomllib.loads(p.read_text(encoding="utf-8"))

    server = _get_table(raw, "server")
    server_cfg = ServerConfig(
        log_level=str(server.get("log_level", ServerConfig.log_level)).upper(),
        version=str(server.get("version", ServerConfig.version)),
    )

    raw_rules = raw.get("rules", [])
    if not isinstance(raw_rules, list):
        raise ConfigurationError("rules must be an array of tables ([[rules]])")
    rules = [_parse_rule(i, r if isinstance(r, dict) else {}) for i, r in enumerate(raw_rules)]

    # 基础校验：避免明显错误配置
    valid_log_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    if server_cfg.log_level not in valid_log_levels:
        raise ConfigurationError(f"server.log_level must be one of {valid_log_levels}, got {server_cfg.log_level}")

    return AppConfig(server=server_cfg, rules=rules)
