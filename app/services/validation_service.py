# app/services/validation_service.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

from core.config import AppConfig
from validators.record import Record
from validators.size_validator import SizeValidator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationReport:
    ok: bool
    errors: List[Dict[str, Any]] = field(default_factory=list)


class AttachmentValidationService:
    """
    主业务编排：
    - 启动时按 config.toml 的 [[rules]] 构造 SizeValidator（配置错误在此抛出）
    - 对每条记录依次执行所有规则，汇总 record.errors
    """

    def __init__(self, validators: List[SizeValidator]):
        self.validators = list(validators)

    @classmethod
    def from_config(cls, cfg: AppConfig) -> "AttachmentValidationService":
        validators = [SizeValidator(rule.attribute, **rule.to_options()) for rule in cfg.rules]
        logger.info(f"[RULES] Loaded size rules. count={len(validators)}")
        for v in validators:
            logger.debug(f"[RULES] {v!r}")
        return cls(validators)

    @property
    def attributes(self) -> List[str]:
        return [a for v in self.validators for a in v.attributes]

    def run(self, record: Record) -> ValidationReport:
        for validator in self.validators:
            validator.validate(record)

        errors = [d.to_dict() for d in record.errors]
        if errors:
            logger.warning(f"[RESULT] Attachment validation failed. errors={len(errors)}")
        else:
            logger.info(f"[RESULT] Attachment validation passed. rules={len(self.validators)}")
        return ValidationReport(ok=not errors, errors=errors)
