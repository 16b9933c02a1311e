"""领域通用异常"""

from typing import Optional


class MailClientException(Exception):
    """
    邮件客户端异常基类

    Attributes:
        message: 错误信息
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(MailClientException):
    """配置无效或缺失"""

    def __init__(self, setting: str, reason: Optional[str] = None):
        self.setting = setting
        self.reason = reason or f"{setting} is required"
        super().__init__(self.reason)
