from __future__ import annotations

from pathlib import Path

import pytest

from coderunner.core.settings import Settings
from coderunner.executor.process import ProcessExecutor
from coderunner.services.pipeline import Pipeline
from coderunner.services.run_service import RunService


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    # không có bootstrap archive, work dir nằm trong tmp_path
    return Settings(
        work_root=tmp_path / "runs",
        bootstrap_file=tmp_path / "missing-bootstrap.tar.gz",
        log_json=False,
    )


@pytest.fixture()
def executor() -> ProcessExecutor:
    return ProcessExecutor()


@pytest.fixture()
def pipeline(executor: ProcessExecutor) -> Pipeline:
    return Pipeline(executor)


@pytest.fixture()
def service(settings: Settings) -> RunService:
    return RunService(settings)


@pytest.fixture()
def workdir(tmp_path: Path) -> Path:
    d = tmp_path / "work"
    d.mkdir()
    return d
