# app/core/stats.py
from __future__ import annotations

import time
from dataclasses import dataclass, field
from threading import Lock


@dataclass
class ValidationStats:
    """校验请求统计（供 /health 使用）"""
    start_time: float = field(default_factory=time.time)
    total_requests: int = 0
    passed_count: int = 0
    rejected_count: int = 0
    error_count: int = 0
    _lock: Lock = field(default_factory=Lock, repr=False)

    def record(self, passed: bool, errors: int = 0) -> None:
        with self._lock:
            self.total_requests += 1
            if passed:
                self.passed_count += 1
            else:
                self.rejected_count += 1
            self.error_count += errors

    def get_snapshot(self) -> dict:
        now = time.time()
        with self._lock:
            start_time = self.start_time
            total_requests = self.total_requests
            passed_count = self.passed_count
            rejected_count = self.rejected_count
            error_count = self.error_count

        uptime_seconds = int(now - start_time)
        return {
            "start_time": time.strftime("%Y-%m-%d %H:%M:%S", time.localtime(start_time)),
            "uptime_seconds": uptime_seconds,
            "uptime_formatted": self._format_uptime(uptime_seconds),
            "total_requests": total_requests,
            "passed_count": passed_count,
            "rejected_count": rejected_count,
            "error_count": error_count,
        }

    @staticmethod
    def _format_uptime(seconds: int) -> str:
        """格式化运行时间，如 "1d 2h 30m 15s" """
        days = seconds // 86400
        hours = (seconds % 86400) // 3600
        minutes = (seconds % 3600) // 60
        secs = seconds % 60

        parts = []
        if days > 0:
            parts.append(f"{days}d")
        if hours > 0:
            parts.append(f"{hours}h")
        if minutes > 0:
            parts.append(f"{minutes}m")
        parts.append(f"{secs}s")
        return " ".join(parts)
