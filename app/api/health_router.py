from __future__ import annotations

from fastapi import APIRouter, Request
from starlette.responses import JSONResponse

router = APIRouter(prefix="/attachments", tags=["health"])


@router.get("/health")
async def health_check(request: Request):
    """
    健康检查接口，返回服务状态信息

    应答参数说明：
    | 参数名              | 类型           | 说明                                     |
    |---------------------|---------------|------------------------------------------|
    | status              | string        | 服务状态，固定返回 "healthy"              |
    | version             | string        | 服务版本号                                |
    | rules               | int           | 已加载的大小规则数量                      |
    | start_time          | string        | 服务启动时间（格式：YYYY-MM-DD HH:MM:SS） |
    | uptime_seconds      | int           | 运行时长（秒）                            |
    | uptime_formatted    | string        | 格式化的运行时长（如："1d 2h 30m 15s"）   |
    | total_requests      | int           | 接收到的校验请求数                        |
    | passed_count        | int           | 校验通过的请求数                          |
    | rejected_count      | int           | 校验未通过的请求数                        |
    | error_count         | int           | 累计写入的校验错误条数                    |
    """
    cfg = request.app.state.cfg
    stats = request.app.state.stats
    service = request.app.state.service

    return JSONResponse(status_code=200, content={
        "status": "healthy",
        "version": cfg.server.version,
        "rules": len(service.validators),
        **stats.get_snapshot(),
    })
