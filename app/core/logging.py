# app/core/logging.py
from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from pathlib import Path
from logging.handlers import TimedRotatingFileHandler
from datetime import datetime, timedelta

_request_id_ctx: ContextVar[str] = ContextVar("request_id", default="-")

LOG_FILE_NAME = "validation.log"


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = _request_id_ctx.get()
        return True


def set_request_id(request_id: str) -> None:
    _request_id_ctx.set(request_id)


def init_logging(level: str = "INFO", log_dir: str | Path | None = "logs", keep_days: int = 7) -> None:
    """
    初始化日志：
    - 输出到 stdout（控制台）
    - 输出到文件（log_dir/validation.log，按天轮转）；log_dir=None 时只输出控制台
    - 格式包含 request_id
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    # 避免重复 handler
    root.handlers.clear()

    fmt = "%(asctime)s %(levelname)s [%(request_id)s] %(name)s: %(message)s"
    formatter = logging.Formatter(fmt=fmt)
    request_filter = RequestIdFilter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(request_filter)
    root.addHandler(console_handler)

    if log_dir is None:
        return

    log_dir_path = Path(log_dir)
    log_dir_path.mkdir(parents=True, exist_ok=True)

    # 每天午夜轮转，文件名后缀：validation.log.YYYY-MM-DD
    file_handler = TimedRotatingFileHandler(
        filename=str(log_dir_path / LOG_FILE_NAME),
        when="midnight",
        interval=1,
        backupCount=keep_days,
        encoding="utf-8",
    )
    file_handler.suffix = "%Y-%m-%d"
    file_handler.setFormatter(formatter)
    file_handler.addFilter(request_filter)
    root.addHandler(file_handler)

    _cleanup_old_logs(log_dir_path, days=keep_days)


def _cleanup_old_logs(log_dir: Path, days: int = 7) -> None:
    """清理超过指定天数的轮转日志"""
    cutoff = (datetime.now() - timedelta(days=days)).timestamp()
    for log_path in log_dir.glob(f"{LOG_FILE_NAME}.*"):
        try:
            if log_path.stat().st_mtime < cutoff:
                log_path.unlink()
        except OSError as e:
            # 清理失败不影响日志功能
            logging.getLogger(__name__).warning(f"[LOGGING] Failed to remove old log. path={log_path}, error={e}")
