"""
进程级日志配置

仅由入口程序调用一次；库代码只使用 logging.getLogger(__name__)。
"""

import logging
import sys

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "INFO", fmt: str = DEFAULT_FORMAT) -> None:
    """
    配置根日志记录器

    Args:
        level: 日志级别名称（DEBUG/INFO/WARNING/ERROR）
        fmt: 日志格式
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(
        level=numeric_level,
        format=fmt,
        stream=sys.stdout,
        force=True,
    )

    # httpx 在 INFO 级别会记录每个请求
    logging.getLogger("httpx").setLevel(logging.WARNING)
