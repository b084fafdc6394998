# app/validators/record.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from core.error_types import DEFAULT_MESSAGES


@dataclass(frozen=True)
class Blob:
    """已存储文件的元数据（只读）"""
    filename: str = ""
    byte_size: Optional[int] = None
    content_type: Optional[str] = None


@dataclass(frozen=True)
class AttachedOne:
    """单文件附件；blob 为 None 表示未挂载"""
    blob: Optional[Blob] = None

    @property
    def attached(self) -> bool:
        return self.blob is not None

    @property
    def filename(self) -> str | None:
        return self.blob.filename if self.blob is not None else None


@dataclass(frozen=True)
class AttachedMany:
    """多文件附件，按顺序迭代出 AttachedOne"""
    attachments: tuple = ()

    @classmethod
    def of(cls, *blobs: Blob) -> "AttachedMany":
        return cls(tuple(AttachedOne(b) for b in blobs))

    @property
    def attached(self) -> bool:
        return any(a.attached for a in self.attachments)

    def __iter__(self) -> Iterator[AttachedOne]:
        return iter(self.attachments)

    def __len__(self) -> int:
        return len(self.attachments)


class _SafeFormat(dict):
    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


@dataclass(frozen=True)
class ErrorDetail:
    """
    单条校验错误。message 用 options 填充占位符；值为 None 的键（单边边界缺失的一侧）
    保留为字面量，如 "{min_size}"；模板本身不合法时原样返回。
    """
    attribute: str
    type: str
    options: Dict[str, Any] = field(default_factory=dict)

    @property
    def message(self) -> str:
        template = DEFAULT_MESSAGES.get(self.type, self.type)
        values = {k: v for k, v in self.options.items() if v is not None}
        try:
            return template.format_map(_SafeFormat(values))
        except (ValueError, IndexError, KeyError, AttributeError):
            return template

    def to_dict(self) -> Dict[str, Any]:
        return {
            "attribute": self.attribute,
            "type": self.type,
            "message": self.message,
            "options": dict(self.options),
        }


class Errors:
    """
    记录级错误集合：校验器只通过 add / added 与其交互。
    """
    def __init__(self) -> None:
        self._details: List[ErrorDetail] = []

    def add(self, attribute: str, type: str, **options: Any) -> ErrorDetail:
        detail = ErrorDetail(attribute=attribute, type=type, options=options)
        self._details.append(detail)
        return detail

    def added(self, attribute: str, type: str, **options: Any) -> bool:
        return ErrorDetail(attribute=attribute, type=type, options=options) in self._details

    def for_attribute(self, attribute: str) -> List[ErrorDetail]:
        return [d for d in self._details if d.attribute == attribute]

    def full_messages(self) -> List[str]:
        return [f"{d.attribute} {d.message}" for d in self._details]

    def clear(self) -> None:
        self._details.clear()

    @property
    def details(self) -> List[ErrorDetail]:
        return list(self._details)

    def __iter__(self) -> Iterator[ErrorDetail]:
        return iter(self._details)

    def __len__(self) -> int:
        return len(self._details)

    def __bool__(self) -> bool:
        return bool(self._details)


class Record:
    """
    持有附件属性的记录：Record(avatar=AttachedOne(...), photos=AttachedMany(...))
    """
    def __init__(self, **attachments: Any) -> None:
        for name in attachments:
            if name == "errors" or name.startswith("_") or hasattr(type(self), name):
                raise ValueError(f"'{name}' is reserved and cannot be used as an attachment name")
        self.errors = Errors()
        for name, value in attachments.items():
            setattr(self, name, value)

    @property
    def valid(self) -> bool:
        return not self.errors
