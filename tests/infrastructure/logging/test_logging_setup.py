"""日志配置测试"""

import logging
from unittest.mock import patch

from infrastructure.logging.setup import DEFAULT_FORMAT, setup_logging


class TestSetupLogging:
    """setup_logging 测试"""

    @patch("infrastructure.logging.setup.logging.basicConfig")
    def test_level_name_is_resolved(self, mock_basic_config):
        """测试日志级别名称转换"""
        setup_logging("debug")

        kwargs = mock_basic_config.call_args.kwargs
        assert kwargs["level"] == logging.DEBUG
        assert kwargs["format"] == DEFAULT_FORMAT

    @patch("infrastructure.logging.setup.logging.basicConfig")
    def test_unknown_level_falls_back_to_info(self, mock_basic_config):
        """测试未知级别回退为 INFO"""
        setup_logging("verbose")

        assert mock_basic_config.call_args.kwargs["level"] == logging.INFO

    @patch("infrastructure.logging.setup.logging.basicConfig")
    def test_httpx_logger_is_quieted(self, mock_basic_config):
        """测试 httpx 日志级别被调高"""
        setup_logging("INFO")

        assert logging.getLogger("httpx").level == logging.WARNING
