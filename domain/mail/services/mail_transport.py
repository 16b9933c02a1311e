"""邮件 HTTP 传输接口"""

from dataclasses import dataclass
from typing import Dict, Protocol


@dataclass(frozen=True)
class TransportResponse:
    """HTTP 响应

    Attributes:
        status_code: HTTP 状态码
        body: 响应正文
    """

    status_code: int
    body: str = ""

    @property
    def is_success(self) -> bool:
        """是否为 2xx 响应"""
        return 200 <= self.status_code < 300


class MailTransport(Protocol):
    """同步 HTTP 传输接口

    实现类负责发出单次 POST 请求。
    网络层失败应以 TransportError 抛出，非 2xx 响应照常返回。
    """

    def post(self, url: str, body: str, headers: Dict[str, str]) -> TransportResponse:
        """发送 POST 请求

        Args:
            url: 请求地址
            body: 请求体（JSON 字符串）
            headers: 请求头

        Returns:
            TransportResponse

        Raises:
            TransportError: 连接、TLS 或超时失败
        """
        ...


class AsyncMailTransport(Protocol):
    """异步 HTTP 传输接口，语义与 MailTransport 相同"""

    async def post(
        self, url: str, body: str, headers: Dict[str, str]
    ) -> TransportResponse:
        ...
