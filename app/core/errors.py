# app/core/errors.py
from __future__ import annotations


class ConfigurationError(ValueError):
    """
    校验规则配置错误：在规则构造 / 加载 config.toml 时立即抛出，
    不会延迟到具体记录的校验阶段。
    """
    def __init__(self, msg: str, option: str | None = None):
        super().__init__(msg)
        self.option = option
