# app/validators/options.py
from __future__ import annotations

from typing import Any, Dict, Iterable


def unfold_procs(record: Any, options: Dict[str, Any], keys: Iterable[str]) -> Dict[str, Any]:
    """
    将 keys 中的可调用配置项按当前记录求值（value(record)），其余原样保留。
    每次校验只调用一次，逐文件检查时复用结果。
    """
    flat = dict(options)
    for key in keys:
        if key in flat and callable(flat[key]):
            flat[key] = flat[key](record)
    return flat
