"""
axe 無障礙掃描

透過 axeUiAutomator2 driver 提供的 `mobile: axeScan` 指令觸發 App 內掃描。
回應若是帶有 axeError 的 dict，視為掃描端回報的錯誤（非例外），
只記錄不寫檔；其餘回應原封不動交給 ResultStore。
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from core.exceptions import ScanError
from utils.logger import log_event, logger

AXE_SCAN_COMMAND = "mobile: axeScan"
AXE_ERROR_KEY = "axeError"
_NO_ERROR = object()


@dataclass(frozen=True)
class ScanResult:
    """掃描結果：成功時帶 payload，失敗時帶 error（axeError 的值可能是 None）"""

    payload: Any = None
    error: Any = _NO_ERROR

    @property
    def is_error(self) -> bool:
        return self.error is not _NO_ERROR

    @classmethod
    def success(cls, payload: Any) -> "ScanResult":
        return cls(payload=payload)

    @classmethod
    def failure(cls, error: Any) -> "ScanResult":
        return cls(error=error)


def classify(payload: Any) -> ScanResult:
    """依 axeError 欄位判斷成功或失敗"""
    if isinstance(payload, Mapping) and AXE_ERROR_KEY in payload:
        return ScanResult.failure(payload[AXE_ERROR_KEY])
    return ScanResult.success(payload)


def run_accessibility_scan(session, settings: dict) -> ScanResult:
    """
    在目前 session 上執行 axe 掃描。

    Args:
        session: Appium driver
        settings: {"apiKey": ...}

    Returns:
        ScanResult；driver 本身拋出的例外不攔截
    """
    logger.info("執行 axe 掃描...")
    payload = session.execute_script(AXE_SCAN_COMMAND, settings)
    result = classify(payload)

    if result.is_error:
        err = ScanError(result.error)
        log_event(logging.ERROR, "scan_error", str(err), axe_error=result.error)
    else:
        logger.info("axe 掃描完成")
    return result
