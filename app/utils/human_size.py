# app/utils/human_size.py
from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

BASE = 1024
STORAGE_UNITS = ["Bytes", "KB", "MB", "GB", "TB", "PB", "EB", "ZB"]

_SIZE_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*([a-zA-Z]*)\s*$")
_UNIT_EXPONENTS = {
    "": 0,
    "b": 0,
    "byte": 0,
    "bytes": 0,
    "kb": 1,
    "mb": 2,
    "gb": 3,
    "tb": 4,
}


def number_to_human_size(number: int | float | None, precision: int = 3) -> str | None:
    """
    字节数转可读字符串（1024 进制，保留 precision 位有效数字，去掉多余的 0）：
      123        -> "123 Bytes"
      1          -> "1 Byte"
      1234       -> "1.21 KB"
      1234567    -> "1.18 MB"
    None 原样返回 None（单边边界时 min/max 其中一个不存在）。
    """
    if number is None:
        return None

    value = Decimal(str(number))
    if abs(value) < BASE:
        n = int(value)
        return f"{n} {'Byte' if n == 1 else 'Bytes'}"

    exponent = 0
    while exponent < len(STORAGE_UNITS) - 1 and abs(value) >= BASE ** (exponent + 1):
        exponent += 1

    scaled = value / (BASE ** exponent)
    digits = scaled.adjusted() + 1
    rounded = scaled.quantize(Decimal(1).scaleb(digits - precision), rounding=ROUND_HALF_UP)
    return f"{format(rounded.normalize(), 'f')} {STORAGE_UNITS[exponent]}"


def parse_size(text: str | int) -> int:
    """
    解析配置里的大小：整数按字节；字符串支持 B/KB/MB/GB/TB 单位，如 "5MB"、"1.5 KB"。
    """
    if isinstance(text, bool):
        raise ValueError(f"invalid size: {text!r}")
    if isinstance(text, int):
        return text

    m = _SIZE_RE.match(str(text))
    if m is None:
        raise ValueError(f"invalid size: {text!r}")

    unit = m.group(2).lower()
    if unit not in _UNIT_EXPONENTS:
        raise ValueError(f"unknown size unit: {m.group(2)!r}")

    try:
        amount = Decimal(m.group(1))
    except InvalidOperation as e:
        raise ValueError(f"invalid size: {text!r}") from e
    return int(amount * (BASE ** _UNIT_EXPONENTS[unit]))
