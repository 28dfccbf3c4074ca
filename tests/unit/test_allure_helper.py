"""
utils.allure_helper 單元測試
驗證 Allure 報告整合輔助的 fallback 行為與正常功能。
當 allure 未安裝時，所有功能應 graceful fallback 不報錯。
"""

from unittest.mock import MagicMock, patch

import pytest


@pytest.mark.unit
class TestAllureStep:
    """allure_step 裝飾器"""

    @pytest.mark.unit
    def test_returns_original_function_when_allure_not_available(self):
        """ALLURE_AVAILABLE=False 時，裝飾器直接回傳原函式"""
        with patch("utils.allure_helper.ALLURE_AVAILABLE", False):
            from utils.allure_helper import allure_step

            def scan(x, y=1):
                return x + y

            assert allure_step("執行 axe 掃描")(scan) is scan

    @pytest.mark.unit
    def test_wraps_with_allure_step_when_available(self):
        """ALLURE_AVAILABLE=True 時，函式被 allure.step 包裝"""
        mock_allure = MagicMock()
        mock_allure.step.side_effect = lambda title: (lambda func: func)

        with patch("utils.allure_helper.ALLURE_AVAILABLE", True), \
             patch("utils.allure_helper.allure", mock_allure, create=True):
            from utils.allure_helper import allure_step

            @allure_step("執行 axe 掃描")
            def scan(x, y=1):
                return x + y

            assert scan(1, y=2) == 3
            assert scan.__name__ == "scan"
            mock_allure.step.assert_called_once_with("執行 axe 掃描")


@pytest.mark.unit
class TestAttachFile:
    """attach_file — axe 結果附件"""

    @pytest.mark.unit
    def test_does_nothing_when_allure_not_available(self):
        with patch("utils.allure_helper.ALLURE_AVAILABLE", False):
            from utils.allure_helper import attach_file

            attach_file("/path/to/result.json", "result")

    @pytest.mark.unit
    def test_uses_filename_as_default_name(self):
        """未指定 name 時使用檔案名稱，附件類型為 JSON"""
        mock_allure = MagicMock()

        with patch("utils.allure_helper.ALLURE_AVAILABLE", True), \
             patch("utils.allure_helper.allure", mock_allure, create=True):
            from utils.allure_helper import attach_file

            attach_file("/tmp/run/abc-axe-result.json")

            mock_allure.attach.file.assert_called_once_with(
                "/tmp/run/abc-axe-result.json",
                name="abc-axe-result.json",
                attachment_type=mock_allure.attachment_type.JSON,
            )
