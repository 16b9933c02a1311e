"""邮件发送异常"""

from typing import Optional

from domain.common.exceptions import MailClientException


class MailValidationError(MailClientException):
    """
    邮件校验失败

    在任何网络请求之前抛出，调用方需修正邮件内容，不应重试。

    Attributes:
        field: 校验失败的字段名
    """

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class HttpError(MailClientException):
    """
    Mailtrap API 返回非 2xx 状态码

    Attributes:
        status_code: HTTP 状态码
        body: 响应正文
    """

    BODY_PREVIEW_LENGTH = 200

    def __init__(self, status_code: int, body: Optional[str] = None):
        self.status_code = status_code
        self.body = body or ""
        super().__init__(
            f"HTTP {status_code}: {self.body[:self.BODY_PREVIEW_LENGTH]}"
        )


class TransportError(MailClientException):
    """网络层失败（DNS、TLS、超时等），原始异常保存在 __cause__ 中"""
