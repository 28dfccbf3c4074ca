"""
core — axe 掃描流程核心

用法：
    from core import AxeScanSession, ReportDispatcher, ReporterPlatform
    from core import ConfigurationError, DriverConnectionError
"""

from core.axe_session import AxeScanSession
from core.driver_manager import DriverManager
from core.exceptions import (
    AxeFrameworkError,
    ConfigurationError,
    DriverConnectionError,
    DriverError,
    PersistenceError,
    ReportDispatchError,
    ScanError,
)
from core.report_dispatcher import (
    REPORT_FORMATS,
    ReportDispatcher,
    ReporterPlatform,
    ReportTask,
)
from core.result_store import ResultStore
from core.run_context import TestRunContext
from core.scan_executor import ScanResult, run_accessibility_scan

__all__ = [
    # Session / Flow
    "AxeScanSession",
    "DriverManager",
    "TestRunContext",
    # Scan / Artifacts
    "run_accessibility_scan",
    "ScanResult",
    "ResultStore",
    "ReportDispatcher",
    "ReporterPlatform",
    "ReportTask",
    "REPORT_FORMATS",
    # Exceptions
    "AxeFrameworkError",
    "ConfigurationError",
    "DriverError",
    "DriverConnectionError",
    "ScanError",
    "PersistenceError",
    "ReportDispatchError",
]
