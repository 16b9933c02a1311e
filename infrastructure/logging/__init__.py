"""日志配置"""

from infrastructure.logging.setup import setup_logging

__all__ = ["setup_logging"]
