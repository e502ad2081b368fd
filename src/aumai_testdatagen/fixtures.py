"""Read and write JSON fixture files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from aumai_testdatagen.exceptions import ExportError, FixtureLoadError

logger = logging.getLogger(__name__)

DEFAULT_FIXTURES_DIR = "fixtures"


def export_to_file(
    records: list[dict[str, Any]],
    filename: str,
    directory: str | Path = DEFAULT_FIXTURES_DIR,
) -> Path:
    """Write *records* as pretty-printed JSON to ``directory/filename``.

    The directory must already exist.  A failed write may leave a truncated
    file behind; callers retry the whole export.
    """
    file_path = Path(directory) / filename
    payload = json.dumps(records, indent=2, ensure_ascii=False)
    try:
        file_path.write_text(payload, encoding="utf-8")
    except OSError as exc:
        raise ExportError(f"Failed to export data to {file_path}: {exc}") from exc
    logger.info("Data exported to %s", file_path)
    return file_path


def load_fixture(
    filename: str,
    directory: str | Path = DEFAULT_FIXTURES_DIR,
) -> Any:  # noqa: ANN401
    """Read a fixture file back verbatim, without validating it against any template."""
    file_path = Path(directory) / filename
    try:
        return json.loads(file_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise FixtureLoadError(f"Failed to load fixture {file_path}: {exc}") from exc


__all__ = ["DEFAULT_FIXTURES_DIR", "export_to_file", "load_fixture"]
