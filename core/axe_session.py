"""
axe 掃描執行流程

    setup()    → 建立 run_id、建立 driver session
    scan()     → 執行 mobile: axeScan，成功時寫入 JSON
    teardown() → 關閉 session，再啟動 html / csv / xml 報告產生

teardown 一定會跑完：session 只釋放一次，報告每個格式都會嘗試啟動。
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from core.driver_manager import DriverManager
from core.report_dispatcher import ReportDispatcher, ReportTask
from core.result_store import ResultStore
from core.run_context import TestRunContext
from core.scan_executor import ScanResult, run_accessibility_scan
from utils.allure_helper import allure_step, attach_file
from utils.logger import logger

if TYPE_CHECKING:
    from config.config import RunConfiguration


class AxeScanSession:
    """單一測試的 session 擁有者"""

    def __init__(
        self,
        config: RunConfiguration,
        dispatcher: ReportDispatcher,
        store: ResultStore | None = None,
    ):
        self.config = config
        self.dispatcher = dispatcher
        self.store = store or ResultStore(config.artifact_dir)
        self.context: TestRunContext | None = None
        self.driver = None
        self.last_result: ScanResult | None = None
        self.artifacts: list[Path] = []

    def setup(self) -> None:
        self.context = TestRunContext.create()
        logger.info(f"===== axe 掃描開始: {self.context.run_id} =====")
        self.driver = DriverManager.create_session(self.config)

    @allure_step("執行 axe 無障礙掃描")
    def scan(self) -> Path | None:
        """
        執行掃描；axeError 時直接返回 None，不寫檔也不拋例外。
        """
        result = run_accessibility_scan(self.driver, self.config.axe_settings())
        self.last_result = result
        if result.is_error:
            return None

        path = self.store.persist(result.payload, self.context.run_id)
        if path is not None:
            self.artifacts.append(path)
            attach_file(str(path))
        return path

    def teardown(self) -> list[ReportTask]:
        driver, self.driver = self.driver, None
        DriverManager.close_session(driver)

        if self.context is None:
            return []
        tasks = self.dispatcher.dispatch_all(self.context.run_id)
        started = sum(1 for t in tasks if t.started)
        logger.info(
            f"===== axe 掃描結束: {self.context.run_id} "
            f"(報告啟動 {started}/{len(tasks)}) ====="
        )
        return tasks
