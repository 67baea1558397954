"""CLI: đọc request JSON từ stdin, in RunResult JSON ra stdout."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from .core.errors import BuildError, RequestError
from .core.settings import load_settings
from .logging import setup_logging
from .services.run_service import RunService, build_error_result


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="coderunner",
        description="Build and run submitted source files, reading the request JSON from stdin.",
    )
    parser.add_argument(
        "--path",
        type=str,
        default=None,
        help="Work directory (default: <work_root>/<prefix>-<unix seconds>).",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a YAML config (default: $CODERUNNER_CONF or conf/coderunner.yaml).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = load_settings(args.config)
    log = setup_logging(settings.log_level, settings.log_json)

    svc = RunService(settings)
    work_path = Path(args.path) if args.path else None
    try:
        result = svc.handle_raw(sys.stdin.buffer.read(), work_path=work_path)
    except BuildError as e:
        # lỗi compile vẫn trả RunResult cho caller
        result = build_error_result(e)
    except RequestError as e:
        log.error("request.failed", error=str(e))
        print(str(e), file=sys.stderr)
        return 1

    # JSON gọn, UTF-8 (không escape non-ASCII)
    json.dump(result.to_dict(), sys.stdout, ensure_ascii=False, separators=(",", ":"))
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
