from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from starlette.responses import JSONResponse

from api.schemas import BlobPayload, ValidateRequest
from core import status_codes
from core.ids import new_request_id
from core.response import ok, fail
from core.logging import set_request_id
from validators.record import AttachedMany, AttachedOne, Blob, Record

router = APIRouter(prefix="/attachments", tags=["attachments"])
logger = logging.getLogger(__name__)


def _to_blob(payload: BlobPayload) -> Blob:
    return Blob(filename=payload.filename, byte_size=payload.byte_size, content_type=payload.content_type)


def build_record(req: ValidateRequest) -> Record:
    """请求体 -> Record：null 为未挂载，list 为多文件，对象为单文件"""
    values = {}
    for name, value in req.attachments.items():
        if value is None:
            values[name] = AttachedOne()
        elif isinstance(value, list):
            values[name] = AttachedMany.of(*(_to_blob(v) for v in value))
        else:
            values[name] = AttachedOne(_to_blob(value))
    return Record(**values)


@router.post("/validate")
async def validate_attachments(request: Request, body: ValidateRequest):
    request_id = body.task_id or new_request_id()
    set_request_id(request_id)

    service = request.app.state.service
    stats = request.app.state.stats

    if not body.attachments:
        logger.warning(f"[/validate] 缺失 attachments. request_id={request_id}")
        stats.record(passed=False)
        return JSONResponse(status_code=200, content=fail(request_id, status_codes.MISSING_ATTACHMENTS))

    unknown = sorted(set(body.attachments) - set(service.attributes))
    if unknown:
        logger.warning(f"[/validate] 未配置规则的属性将被忽略. request_id={request_id}, attributes={unknown}")

    try:
        record = build_record(body)
    except ValueError as e:
        logger.warning(f"[/validate] 非法属性名. request_id={request_id}, error={e}")
        stats.record(passed=False)
        return JSONResponse(status_code=200, content=fail(request_id, status_codes.INVALID_ATTRIBUTE_NAME))

    logger.info(f"[/validate] 接收到附件校验请求. request_id={request_id}, attributes={sorted(body.attachments)}")
    report = service.run(record)
    stats.record(passed=report.ok, errors=len(report.errors))

    if report.ok:
        return JSONResponse(status_code=200, content=ok(request_id, {"valid": True}))
    return JSONResponse(
        status_code=200,
        content=fail(request_id, status_codes.ATTACHMENT_SIZE_INVALID, errors=report.errors),
    )
