from __future__ import annotations

import json
import logging
from pathlib import Path

from .exceptions import OutputWriteError
from .models import CurationResult

logger = logging.getLogger(__name__)


def write_result(result: CurationResult, path: Path | str) -> Path:
    """Overwrite ``path`` with the result as pretty-printed UTF-8 JSON, creating parent dirs."""

    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as fp:
            json.dump(result.to_dict(), fp, ensure_ascii=False, indent=2)
    except OSError as e:
        raise OutputWriteError(f"Could not write {path}: {e}") from e
    logger.info("Written %d items to %s", result.count, path)
    return path


def read_result(path: Path | str) -> CurationResult:
    with Path(path).open("r", encoding="utf-8") as fp:
        return CurationResult.from_dict(json.load(fp))
