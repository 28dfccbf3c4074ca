"""
Allure 報告整合輔助
把 axe 掃描步驟與 JSON 結果掛到 Allure 報告。
如未安裝 allure-pytest，所有方法會 graceful fallback，不影響測試執行。
"""

import functools
from pathlib import Path

from utils.logger import logger

try:
    import allure
    ALLURE_AVAILABLE = True
except ImportError:
    ALLURE_AVAILABLE = False
    logger.debug("allure-pytest 未安裝，Allure 報告功能停用")


def allure_step(title: str):
    """
    裝飾器：將函式標記為 Allure step。
    未安裝 allure 時直接執行原函式。
    """
    def decorator(func):
        if ALLURE_AVAILABLE:
            @allure.step(title)
            @functools.wraps(func)
            def wrapper(*args, **kwargs):
                return func(*args, **kwargs)
            return wrapper
        return func
    return decorator


def attach_file(filepath: str, name: str | None = None) -> None:
    """將 axe 結果檔附加到 Allure 報告"""
    if ALLURE_AVAILABLE:
        path = Path(filepath)
        allure.attach.file(
            str(path),
            name=name or path.name,
            attachment_type=allure.attachment_type.JSON,
        )
