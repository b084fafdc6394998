# app/validators/size_validator.py
from __future__ import annotations

import logging
import math
from numbers import Real
from typing import Any, Dict, Iterable, List, Mapping, Sequence

from core.errors import ConfigurationError
from utils.human_size import number_to_human_size
from validators.errorable import add_error, initialize_error_options
from validators.options import unfold_procs

logger = logging.getLogger(__name__)

AVAILABLE_CHECKS = (
    "less_than",
    "less_than_or_equal_to",
    "greater_than",
    "greater_than_or_equal_to",
    "between",
)

VALIDITY_MESSAGE = (
    "You must pass either :less_than(_or_equal_to), :greater_than(_or_equal_to), "
    "or :between to the validator"
)


def check_validity(options: Mapping[str, Any]) -> None:
    """
    规则构造时的配置检查：
    - 五个边界键必须恰好出现一个（只看键是否存在，值为 0 也算）
    - 静态值必须是非负数字；between 必须是 (min, max) 且 min <= max
    - 可调用值按记录动态求值，这里不检查
    """
    present = [k for k in AVAILABLE_CHECKS if k in options]
    if len(present) != 1:
        raise ConfigurationError(VALIDITY_MESSAGE)

    key = present[0]
    value = options[key]
    if not callable(value):
        _check_bound(key, value)


def _check_number(key: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ConfigurationError(f"{key} must be a number of bytes, got {value!r}", option=key)
    if not math.isfinite(value):
        raise ConfigurationError(f"{key} must be a finite number, got {value!r}", option=key)
    if value < 0:
        raise ConfigurationError(f"{key} must be >= 0, got {value!r}", option=key)


def _check_bound(key: str, value: Any) -> None:
    if key != "between":
        _check_number(key, value)
        return

    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence) or len(value) != 2:
        raise ConfigurationError(f"between must be a (min, max) pair, got {value!r}", option=key)
    lo, hi = value
    _check_number(key, lo)
    _check_number(key, hi)
    if lo > hi:
        raise ConfigurationError(f"between min must be <= max, got {value!r}", option=key)


def _byte_size(file: Any) -> int:
    blob = getattr(file, "blob", None)
    if blob is None:
        return 0
    return int(getattr(blob, "byte_size", None) or 0)


def _wrap(value: Any) -> List[Any]:
    if hasattr(value, "__iter__") and not hasattr(value, "blob"):
        return list(value)
    return [value]


def is_valid(file_size: int, flat_options: Dict[str, Any]) -> bool:
    # 负数说明上游数据异常，一律不通过
    if file_size < 0:
        return False

    if "between" in flat_options:
        lo, hi = flat_options["between"]
        return lo <= file_size <= hi
    if "less_than" in flat_options:
        return file_size < flat_options["less_than"]
    if "less_than_or_equal_to" in flat_options:
        return file_size <= flat_options["less_than_or_equal_to"]
    if "greater_than" in flat_options:
        return file_size > flat_options["greater_than"]
    if "greater_than_or_equal_to" in flat_options:
        return file_size >= flat_options["greater_than_or_equal_to"]
    return False


def min_size(flat_options: Dict[str, Any]) -> Any:
    if "between" in flat_options:
        return flat_options["between"][0]
    return flat_options.get("greater_than", flat_options.get("greater_than_or_equal_to"))


def max_size(flat_options: Dict[str, Any]) -> Any:
    if "between" in flat_options:
        return flat_options["between"][1]
    return flat_options.get("less_than", flat_options.get("less_than_or_equal_to"))


class SizeValidator:
    """
    附件文件大小校验：
    - 属性未挂载文件：直接通过
    - 单文件 / 多文件统一成列表逐个检查
    - 第一个不满足边界的文件写入一条错误后停止
    """

    validator_type = "size"

    def __init__(self, attributes: str | Iterable[str], **options: Any):
        if isinstance(attributes, str):
            attributes = [attributes]
        self.attributes = tuple(attributes)
        if not self.attributes:
            raise ConfigurationError("at least one attribute is required")

        check_validity(options)
        self.options: Dict[str, Any] = dict(options)
        self.check = next(k for k in AVAILABLE_CHECKS if k in self.options)

    @property
    def error_type(self) -> str:
        return f"file_size_not_{self.check}"

    def validate(self, record: Any) -> bool:
        for attribute in self.attributes:
            self.validate_each(record, attribute, getattr(record, attribute, None))
        return True

    def validate_each(self, record: Any, attribute: str, value: Any) -> bool:
        if value is None or not value.attached:
            logger.debug(f"[VALIDATE] Nothing attached, skip. attribute={attribute}")
            return True

        files = _wrap(value)
        flat_options = unfold_procs(record, self.options, AVAILABLE_CHECKS)
        if callable(self.options[self.check]):
            _check_bound(self.check, flat_options[self.check])

        for file in files:
            byte_size = _byte_size(file)
            if is_valid(byte_size, flat_options):
                continue

            errors_options = initialize_error_options(self.validator_type, self.options, file)
            errors_options["file_size"] = number_to_human_size(byte_size)
            errors_options["min_size"] = number_to_human_size(min_size(flat_options))
            errors_options["max_size"] = number_to_human_size(max_size(flat_options))

            add_error(record, attribute, self.error_type, **errors_options)
            break

        return True

    def __repr__(self) -> str:
        return f"SizeValidator(attributes={self.attributes!r}, {self.check}={self.options[self.check]!r})"
