from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import load_config
from core.logging import init_logging
from core.stats import ValidationStats

from services.validation_service import AttachmentValidationService

from api.routes import router as api_router
from api.health_router import router as health_router

ROOT_DIR = Path(__file__).resolve().parent.parent  # /path/to/attachment_size_validation


def create_app(config_path: str | Path | None = None, log_dir: str | Path | None = None) -> FastAPI:
    app = FastAPI(title="Attachment Size Validation", version="1.0.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    async def on_startup() -> None:
        cfg = load_config(config_path or ROOT_DIR / "config.toml")
        init_logging(cfg.server.log_level, log_dir=log_dir or ROOT_DIR / "logs")

        # 规则配置错误（边界缺失/重复）在这里直接抛出，服务不启动
        service = AttachmentValidationService.from_config(cfg)

        app.state.cfg = cfg
        app.state.service = service
        app.state.stats = ValidationStats()

    app.include_router(health_router)
    app.include_router(api_router)
    return app


app = create_app()


# uvicorn main:app --app-dir app --host 0.0.0.0 --port 8090 --reload
