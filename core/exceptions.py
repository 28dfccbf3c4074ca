"""
自訂 Exception 體系

axe 掃描流程的錯誤分類。只有 setup 階段的錯誤會中止測試，
teardown 階段的錯誤一律記錄後吞掉，不影響 session 釋放與報告產生。

Exception 樹：
    AxeFrameworkError
    ├── ConfigurationError       (setup，致命)
    ├── DriverError
    │   └── DriverConnectionError (setup，致命)
    ├── ScanError                (axeError 回應，僅記錄)
    ├── PersistenceError         (JSON 寫檔失敗，僅記錄)
    └── ReportDispatchError      (reporter 啟動失敗，僅記錄)
"""


class AxeFrameworkError(Exception):
    """框架所有例外的基底，catch 這個就能攔截一切框架錯誤"""

    def __init__(self, message: str = "", context: dict | None = None):
        self.context = context or {}
        super().__init__(message)


# ── Config 相關 ──

class ConfigurationError(AxeFrameworkError):
    """設定缺失或無效：API key 未設定、APK 不存在"""

    def __init__(self, key: str = "", reason: str = ""):
        msg = f"設定錯誤: {key}" if key else "設定錯誤"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg, context={"key": key})


# ── Driver 相關 ──

class DriverError(AxeFrameworkError):
    """Driver 相關錯誤"""


class DriverConnectionError(DriverError):
    """無法連接到 Appium Server，或 URL 格式錯誤"""

    def __init__(self, url: str = "", original: Exception | None = None):
        self.original = original
        msg = f"無法連接到 Appium Server: {url}"
        if original:
            msg += f" ({type(original).__name__}: {original})"
        super().__init__(msg, context={"url": url})


# ── 掃描 / 產出 ──

class ScanError(AxeFrameworkError):
    """axe 掃描回傳 axeError（非致命，只記錄）"""

    def __init__(self, error=None):
        self.error = error
        super().__init__(f"Axe error: {error}", context={"axeError": error})


class PersistenceError(AxeFrameworkError):
    """掃描結果寫入 JSON 檔失敗"""

    def __init__(self, path: str = "", original: Exception | None = None):
        self.original = original
        msg = f"無法寫入掃描結果: {path}"
        if original:
            msg += f" ({type(original).__name__}: {original})"
        super().__init__(msg, context={"path": path})


class ReportDispatchError(AxeFrameworkError):
    """無法啟動 reporter 執行檔"""

    def __init__(self, report_format: str = "", executable: str = "",
                 original: Exception | None = None):
        self.original = original
        msg = f"無法啟動 reporter [{report_format}]: {executable}"
        if original:
            msg += f" ({type(original).__name__}: {original})"
        super().__init__(
            msg, context={"format": report_format, "executable": executable},
        )
