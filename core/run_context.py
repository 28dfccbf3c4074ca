"""
單次測試執行的 context

run_id 以時間戳記命名，用來區隔同一次執行產生的 JSON 結果與報告。
"""

from dataclasses import dataclass
from datetime import datetime

RUN_ID_FORMAT = "%Y-%m-%d_%H-%M-%S"


@dataclass(frozen=True)
class TestRunContext:
    """setup 時建立，teardown 時讀取，之後不再變動"""

    __test__ = False  # 避免 pytest 把它當成測試類別收集

    run_id: str

    @classmethod
    def create(cls, now: datetime | None = None) -> "TestRunContext":
        now = now or datetime.now()
        return cls(run_id=now.strftime(RUN_ID_FORMAT))
