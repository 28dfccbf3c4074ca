"""
axe 報告產生

呼叫 _axe-reporter-bin/ 底下的 reporter 執行檔，把某次執行的 JSON 結果
轉成 html / csv / xml 報告：

    reporter-cli-linux _axe-results-json/<run_id> _axe-results-html/<run_id> --format html

reporter 以獨立 process 啟動，不等待結束、不讀 exit code。
啟動失敗記錄在 ReportTask.error 並寫入結構化 log，其餘格式照常啟動。
"""

from __future__ import annotations

import logging
import platform as _platform
import subprocess
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from core.exceptions import ReportDispatchError
from core.result_store import RESULTS_JSON_DIR
from utils.logger import log_event, logger

REPORTER_BIN_DIR = "_axe-reporter-bin"
REPORT_FORMATS = ("html", "csv", "xml")
DEFAULT_FORMAT = "html"


class ReporterPlatform(Enum):
    """各平台對應的 reporter 執行檔"""

    WINDOWS = "reporter-cli-win.exe"
    MACOS = "reporter-cli-macos"
    LINUX = "reporter-cli-linux"

    @property
    def executable(self) -> str:
        return self.value

    @classmethod
    def detect(cls, system_name: str | None = None) -> ReporterPlatform:
        """
        依作業系統名稱選擇平台。

        無法辨識的系統一律回傳 WINDOWS。
        """
        name = (system_name if system_name is not None else _platform.system()).lower()
        if "darwin" in name or "mac" in name:
            return cls.MACOS
        if "linux" in name:
            return cls.LINUX
        return cls.WINDOWS


@dataclass
class ReportTask:
    """一次 reporter 啟動的紀錄"""

    report_format: str
    executable: Path
    command: list[str] = field(default_factory=list)
    process: subprocess.Popen | None = None
    error: ReportDispatchError | None = None

    @property
    def started(self) -> bool:
        return self.process is not None


def normalize_format(report_format: str) -> str:
    """未知格式視為 html"""
    return report_format if report_format in REPORT_FORMATS else DEFAULT_FORMAT


class ReportDispatcher:
    """依平台啟動 reporter，每個格式獨立處理"""

    def __init__(self, platform: ReporterPlatform, artifact_dir: Path | str):
        self.platform = platform
        self.artifact_dir = Path(artifact_dir).resolve()

    def executable_path(self) -> Path:
        return self.artifact_dir / REPORTER_BIN_DIR / self.platform.executable

    def build_command(self, run_id: str, report_format: str) -> list[str]:
        fmt = normalize_format(report_format)
        return [
            str(self.executable_path()),
            f"{RESULTS_JSON_DIR}/{run_id}",
            f"_axe-results-{fmt}/{run_id}",
            "--format",
            fmt,
        ]

    def dispatch(self, run_id: str, report_format: str) -> ReportTask:
        """啟動單一格式的 reporter（不等待結束）"""
        fmt = normalize_format(report_format)
        command = self.build_command(run_id, fmt)
        task = ReportTask(
            report_format=fmt, executable=self.executable_path(), command=command,
        )

        try:
            task.process = subprocess.Popen(
                command,
                cwd=self.artifact_dir,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as e:
            task.error = ReportDispatchError(fmt, str(task.executable), e)
            log_event(
                logging.ERROR, "report_dispatch_failed", str(task.error),
                report_format=fmt, executable=str(task.executable), run_id=run_id,
            )
            return task

        logger.info(f"已啟動 {fmt} 報告產生: {' '.join(command)}")
        return task

    def dispatch_all(
        self, run_id: str, formats: tuple[str, ...] | list[str] = REPORT_FORMATS,
    ) -> list[ReportTask]:
        """依序啟動所有格式，單一格式失敗不影響其他格式；重複格式只啟動一次"""
        unique = dict.fromkeys(normalize_format(fmt) for fmt in formats)
        return [self.dispatch(run_id, fmt) for fmt in unique]
