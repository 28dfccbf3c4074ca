"""
掃描結果儲存

成功的掃描結果寫到：
    <artifact_dir>/_axe-results-json/<run_id>/<uuid>-axe-result.json

檔名使用 uuid4，同一個 run_id 下多次掃描不會互相覆蓋。
寫檔失敗只記錄，不中斷後續 teardown。
"""

import json
import logging
import uuid
from pathlib import Path
from typing import Any

from core.exceptions import PersistenceError
from utils.logger import log_event, logger

RESULTS_JSON_DIR = "_axe-results-json"
RESULT_SUFFIX = "-axe-result.json"


class ResultStore:
    """把 axe 掃描結果序列化成 JSON 檔"""

    def __init__(self, artifact_dir: Path | str):
        self.artifact_dir = Path(artifact_dir)

    def run_dir(self, run_id: str) -> Path:
        return self.artifact_dir / RESULTS_JSON_DIR / run_id

    def persist(self, payload: Any, run_id: str) -> Path | None:
        """
        寫入一份掃描結果。

        Returns:
            檔案路徑；失敗時回傳 None
        """
        directory = self.run_dir(run_id)
        filepath = directory / f"{uuid.uuid4()}{RESULT_SUFFIX}"

        try:
            content = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
            directory.mkdir(parents=True, exist_ok=True)
            filepath.write_text(content, encoding="utf-8")
        except (OSError, TypeError, ValueError) as e:
            err = PersistenceError(str(filepath), e)
            log_event(logging.ERROR, "persist_failed", str(err), path=str(filepath))
            return None

        logger.info(f"axe 結果已儲存: {filepath}")
        return filepath
