"""
Driver 生命週期管理

負責建立與關閉 axeUiAutomator2 driver session。

- 建立前先驗證設定（API key、APK），失敗直接拋出 ConfigurationError，不連線
- Appium server 連線前健康檢查（僅警告）
- 連線只嘗試一次，失敗包成 DriverConnectionError
- 關閉時的任何錯誤只記錄，不往上拋
"""

from __future__ import annotations

import urllib.error
import urllib.parse
import urllib.request
from typing import TYPE_CHECKING

from appium import webdriver
from appium.options.android import UiAutomator2Options

from core.exceptions import DriverConnectionError
from utils.logger import logger

if TYPE_CHECKING:
    from config.config import RunConfiguration


class DriverManager:
    """管理 Appium WebDriver 的建立與銷毀"""

    # ── Appium Server 健康檢查 ──

    @staticmethod
    def health_check(url: str, timeout: float = 5.0) -> bool:
        """
        檢查 Appium server 是否可連線。

        Returns:
            True = server 可用, False = 不可用
        """
        status_url = f"{url.rstrip('/')}/status"
        try:
            req = urllib.request.Request(status_url, method="GET")
            with urllib.request.urlopen(req, timeout=timeout) as resp:
                return resp.status == 200
        except (urllib.error.URLError, OSError, TimeoutError, ValueError):
            return False

    @staticmethod
    def validate_url(url: str) -> None:
        """URL 必須是 http(s) 絕對路徑"""
        parsed = urllib.parse.urlparse(url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise DriverConnectionError(url, ValueError("malformed driver URL"))

    # ── Session 建立 / 關閉 ──

    @classmethod
    def create_session(cls, config: RunConfiguration) -> webdriver.Remote:
        """
        依設定建立 Android driver session。

        Raises:
            ConfigurationError: API key 為空或 APK 不存在
            DriverConnectionError: URL 格式錯誤或 server 拒絕連線
        """
        config.validate()
        cls.validate_url(config.driver_url)

        options = UiAutomator2Options().load_capabilities(config.capabilities())

        if not cls.health_check(config.driver_url):
            logger.warning(
                f"Appium server 健康檢查失敗: {config.driver_url}，仍嘗試連線..."
            )

        try:
            drv = webdriver.Remote(
                command_executor=config.driver_url,
                options=options,
            )
        except Exception as e:
            raise DriverConnectionError(config.driver_url, e) from e

        logger.info(
            f"Driver 已建立: {config.device_name} -> {config.driver_url}"
        )
        return drv

    @staticmethod
    def close_session(session) -> None:
        """安全關閉 session，任何錯誤只記錄"""
        if session is None:
            return
        try:
            session.quit()
        except Exception as e:
            logger.warning(f"關閉 driver 失敗（已忽略）: {type(e).__name__}: {e}")
            return
        logger.info("Driver 已關閉")
