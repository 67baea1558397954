from __future__ import annotations
import tempfile
import threading
from pathlib import Path
from typing import Any, Dict, Optional

import structlog
from fastapi import Body, FastAPI, HTTPException

from .core.errors import (
    BuildError,
    EmptyFileContentError,
    EmptyFileNameError,
    NoFilesError,
    ParseRequestError,
    RequestError,
    StripWorkPathError,
)
from .core.settings import Settings, load_settings
from .logging import setup_logging
from .schemas import RunResultRes, parse_request
from .services.run_service import RunService, build_error_result

log = structlog.get_logger(__name__)

# lỗi do request sai hình dạng -> 400, còn lại (FS, bootstrap) -> 500
_CLIENT_ERRORS = (ParseRequestError, EmptyFileNameError, EmptyFileContentError, NoFilesError, StripWorkPathError)


def create_app(settings: Optional[Settings] = None, svc: Optional[RunService] = None) -> FastAPI:
    settings = settings or load_settings()
    setup_logging(settings.log_level, settings.log_json)
    svc = svc or RunService(settings)

    # mỗi lần chỉ chạy một request (không chạy song song)
    lock = threading.Lock()

    app = FastAPI(title="Code Runner API")

    @app.get("/")
    async def root():
        return {"message": "Welcome to the code runner API"}

    @app.get("/health")
    def health():
        return {"ok": True}

    @app.post("/run", response_model=RunResultRes)
    def run(payload: Dict[str, Any] = Body(...)):
        try:
            req = parse_request(payload)
        except ParseRequestError as e:
            raise HTTPException(status_code=400, detail=str(e))

        settings.work_root.mkdir(parents=True, exist_ok=True)
        with lock, tempfile.TemporaryDirectory(prefix=f"{settings.work_dir_prefix}-", dir=settings.work_root) as tmp:
            try:
                result = svc.handle(req, work_path=Path(tmp))
            except BuildError as e:
                result = build_error_result(e)
            except _CLIENT_ERRORS as e:
                raise HTTPException(status_code=400, detail=str(e))
            except RequestError as e:
                log.error("request.failed", error=str(e))
                raise HTTPException(status_code=500, detail=str(e))

        return RunResultRes(**result.to_dict())

    return app


app = create_app()
