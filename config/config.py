"""
設定管理模組
集中解析 axe DevTools Mobile 掃描所需的設定：API key、裝置、APK、Appium server。

設定查找順序：
    1. 環境變數 (最高優先)
    2. .env 檔 (路徑由 AXE_ENV_FILE 指定，預設為目前目錄下的 .env，不存在則略過)
    3. 程式碼內建預設值

RunConfiguration 在程序啟動時建立一次，之後以參數傳給各元件，
不使用全域可變設定。
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

from dotenv import dotenv_values

from core.exceptions import ConfigurationError
from utils.logger import logger

# 內建預設值
DEFAULT_API_KEY = ""
DEFAULT_DEVICE_NAME = "INSERT_DEVICE_NAME_HERE"
DEFAULT_APK_PATH = "INSERT_APK_PATH_HERE"
DEFAULT_APP_PACKAGE = "INSERT_APP_PACKAGE_HERE"
DEFAULT_APP_ACTIVITY = ".MainActivity"
DEFAULT_DRIVER_URL = "http://localhost:4723"

AUTOMATION_NAME = "axeUiAutomator2"
PLATFORM_NAME = "Android"


@lru_cache(maxsize=None)
def _load_source(env_file: str) -> dict[str, str]:
    """合併 .env 與環境變數，環境變數優先；結果在程序內快取"""
    try:
        file_values = dotenv_values(env_file)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(
            f"無法讀取 .env 檔，只使用環境變數: {env_file} ({type(e).__name__}: {e})"
        )
        file_values = {}

    merged = {key: value for key, value in file_values.items() if value is not None}
    merged.update(os.environ)
    return merged


def env_file_path() -> str:
    return os.getenv("AXE_ENV_FILE", ".env")


def resolve(key: str, default: str = "") -> str:
    """
    取得設定值，不存在時回傳 default，永不拋出例外。

    Args:
        key: 設定名稱，如 "DEVICE_NAME"
        default: 找不到時的預設值
    """
    return _load_source(env_file_path()).get(key, default)


def reload() -> None:
    """清除快取（測試或切換 .env 時使用）"""
    _load_source.cache_clear()


@dataclass(frozen=True)
class RunConfiguration:
    """單次執行的不可變設定"""

    api_key: str
    device_name: str = DEFAULT_DEVICE_NAME
    apk_path: str = DEFAULT_APK_PATH
    app_package: str = DEFAULT_APP_PACKAGE
    app_activity: str = DEFAULT_APP_ACTIVITY
    driver_url: str = DEFAULT_DRIVER_URL
    artifact_dir: Path = field(default_factory=Path.cwd)

    @classmethod
    def from_env(cls) -> "RunConfiguration":
        """從環境變數 / .env 建立設定"""
        return cls(
            api_key=resolve("AXE_DEVTOOLS_MOBILE_API_KEY", DEFAULT_API_KEY),
            device_name=resolve("DEVICE_NAME", DEFAULT_DEVICE_NAME),
            apk_path=resolve("APK_PATH", DEFAULT_APK_PATH),
            app_package=resolve("APP_PACKAGE", DEFAULT_APP_PACKAGE),
            app_activity=resolve("APP_ACTIVITY", DEFAULT_APP_ACTIVITY),
            driver_url=resolve("DRIVER_URL", DEFAULT_DRIVER_URL),
            artifact_dir=Path(resolve("AXE_ARTIFACT_DIR", str(Path.cwd()))),
        )

    def validate(self) -> None:
        """
        建立 session 前的必要檢查。

        Raises:
            ConfigurationError: API key 為空，或 APK 檔案不存在
        """
        if not self.api_key:
            raise ConfigurationError(
                "AXE_DEVTOOLS_MOBILE_API_KEY", "variable is not set"
            )
        if not self.apk_path or not Path(self.apk_path).is_file():
            raise ConfigurationError(
                "APK_PATH", f"APK file not found at: {self.apk_path}"
            )

    def capabilities(self) -> dict:
        """Appium desired capabilities"""
        return {
            "platformName": PLATFORM_NAME,
            "appium:deviceName": self.device_name,
            "appium:automationName": AUTOMATION_NAME,
            "appium:app": self.apk_path,
            "appium:appPackage": self.app_package,
            "appium:appActivity": self.app_activity,
        }

    def axe_settings(self) -> dict:
        """傳給 mobile: axeScan 的設定"""
        return {"apiKey": self.api_key}
