# app/core/ids.py
from __future__ import annotations

import uuid


def new_request_id() -> str:
    """
    生成 request_id：UUID4 hex（请求未携带 task_id 时使用）
    """
    return uuid.uuid4().hex
