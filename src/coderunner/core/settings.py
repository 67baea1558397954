from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CONF = "conf/coderunner.yaml"


class Settings(BaseSettings):
    """Cấu hình runner: env CODERUNNER_* + (tùy chọn) conf/coderunner.yaml."""

    # ---- work dir ----
    work_root: Path = Path(tempfile.gettempdir())
    work_dir_prefix: str = "glot"

    # một số image ngôn ngữ có sẵn archive để giải nén vào work dir
    bootstrap_file: Path = Path("/bootstrap.tar.gz")

    # ---- process ----
    shell: str = "sh"

    # ---- logging ----
    log_level: str = "INFO"
    log_json: bool = True

    model_config = SettingsConfigDict(env_prefix="CODERUNNER_", extra="ignore")


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"config file {path} must contain a mapping, got {type(data).__name__}")
    return data


def load_settings(path: Optional[Union[str, Path]] = None) -> Settings:
    # 0) base từ env CODERUNNER_*
    s = Settings()

    # 1) YAML (--config > CODERUNNER_CONF > conf/coderunner.yaml), file thiếu thì bỏ qua
    conf = Path(path or os.environ.get("CODERUNNER_CONF", DEFAULT_CONF))
    data = _read_yaml(conf)

    # 2) merge, ép đúng kiểu qua validate của pydantic
    known = {k: v for k, v in data.items() if k in Settings.model_fields}
    if not known:
        return s
    return Settings.model_validate({**s.model_dump(), **known})
