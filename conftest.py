"""
pytest 全域 fixtures

提供：
- run_config fixture：程序啟動時解析一次的 RunConfiguration
- reporter_platform fixture：啟動時決定一次的 reporter 平台
- axe_session fixture：setup 建立 driver，teardown 關閉 driver 並產生報告
- 命令列參數支援 (--env-file)
"""

import os

import pytest

from core.report_dispatcher import ReportDispatcher, ReporterPlatform
from utils.logger import logger


# ── 命令列參數 ──

def pytest_addoption(parser):
    """新增自訂命令列參數"""
    parser.addoption(
        "--env-file",
        action="store",
        default=None,
        help=".env 檔路徑（覆蓋 AXE_ENV_FILE）",
    )


# ── Session / Configuration ──

@pytest.fixture(scope="session")
def run_config(request):
    """解析設定（整個 pytest session 只做一次）"""
    from config import config as axe_config

    env_file = request.config.getoption("--env-file")
    if env_file:
        os.environ["AXE_ENV_FILE"] = env_file
        axe_config.reload()
    return axe_config.RunConfiguration.from_env()


@pytest.fixture(scope="session")
def reporter_platform() -> ReporterPlatform:
    platform = ReporterPlatform.detect()
    logger.info(f"Reporter 平台: {platform.name} ({platform.executable})")
    return platform


# ── axe 掃描 session ──

@pytest.fixture(scope="function")
def axe_session(run_config, reporter_platform):
    """
    每個測試函式自動建立並銷毀 driver。

    setup 失敗（設定錯誤、無法連線）時測試直接中止，不會產生報告；
    測試本體不論成功與否，teardown 都會關閉 driver 並啟動報告產生。
    """
    from core.axe_session import AxeScanSession

    dispatcher = ReportDispatcher(reporter_platform, run_config.artifact_dir)
    session = AxeScanSession(run_config, dispatcher)
    session.setup()
    yield session
    session.teardown()
