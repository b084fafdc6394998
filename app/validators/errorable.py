# app/validators/errorable.py
from __future__ import annotations

import logging
from typing import Any, Dict

logger = logging.getLogger(__name__)


def get_filename(file: Any) -> str | None:
    blob = getattr(file, "blob", None)
    if blob is None:
        return None
    return getattr(blob, "filename", None)


def initialize_error_options(validator_type: str, options: Dict[str, Any], file: Any) -> Dict[str, Any]:
    """
    所有附件校验器共用的错误参数：
    - validator_type：校验器名称
    - custom_message：配置的 message（没有则为 None）
    - filename：出错的文件名
    error_options 中的自定义键原样透传。
    """
    errors_options: Dict[str, Any] = {
        "validator_type": validator_type,
        "custom_message": options.get("message"),
        "filename": get_filename(file),
    }
    errors_options.update(options.get("error_options") or {})
    return errors_options


def add_error(record: Any, attribute: str, error_type: str, **errors_options: Any) -> None:
    """
    写入记录的错误集合；配置了 custom_message 时以它作为错误类型。
    同样的错误（属性/类型/参数都相同）只记录一次。
    """
    type_ = errors_options.get("custom_message") or error_type
    if record.errors.added(attribute, type_, **errors_options):
        return

    record.errors.add(attribute, type_, **errors_options)
    logger.info(
        f"[VALIDATE] Error added. attribute={attribute}, type={error_type}, "
        f"filename={errors_options.get('filename')}, file_size={errors_options.get('file_size')}"
    )
