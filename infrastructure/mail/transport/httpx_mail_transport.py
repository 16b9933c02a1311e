"""基于 httpx 的 HTTP 传输实现"""

import logging
from typing import Dict, Optional

import httpx

from domain.mail.exceptions import TransportError
from domain.mail.services.mail_transport import TransportResponse


class HttpxMailTransport:
    """同步 HTTP 传输

    使用 httpx 发送单次 POST 请求，不做重试。
    非 2xx 响应原样返回，由调用方判断。

    Attributes:
        TIMEOUT: 默认请求超时时间（秒）
    """

    TIMEOUT: float = 30.0

    def __init__(
        self,
        timeout: Optional[float] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """初始化传输

        Args:
            timeout: 请求超时时间（秒），默认 TIMEOUT
            logger: 日志记录器（可选）
        """
        self._timeout = timeout if timeout is not None else self.TIMEOUT
        self._logger = logger or logging.getLogger(__name__)

    def post(self, url: str, body: str, headers: Dict[str, str]) -> TransportResponse:
        try:
            response = httpx.post(
                url,
                content=body.encode("utf-8"),
                headers=headers,
                timeout=self._timeout,
            )
        except httpx.TimeoutException as e:
            self._logger.warning(f"Request timeout: {url}")
            raise TransportError(f"Request timeout: {e}") from e
        except httpx.RequestError as e:
            self._logger.warning(f"Request error: {url} - {e}")
            raise TransportError(f"Request error: {e}") from e

        self._logger.debug(f"POST {url} -> {response.status_code}")
        return TransportResponse(status_code=response.status_code, body=response.text)


class AsyncHttpxMailTransport:
    """异步 HTTP 传输，基于 httpx.AsyncClient"""

    TIMEOUT: float = 30.0

    def __init__(
        self,
        timeout: Optional[float] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._timeout = timeout if timeout is not None else self.TIMEOUT
        self._logger = logger or logging.getLogger(__name__)

    async def post(
        self, url: str, body: str, headers: Dict[str, str]
    ) -> TransportResponse:
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(
                    url,
                    content=body.encode("utf-8"),
                    headers=headers,
                )
        except httpx.TimeoutException as e:
            self._logger.warning(f"Request timeout: {url}")
            raise TransportError(f"Request timeout: {e}") from e
        except httpx.RequestError as e:
            self._logger.warning(f"Request error: {url} - {e}")
            raise TransportError(f"Request error: {e}") from e

        self._logger.debug(f"POST {url} -> {response.status_code}")
        return TransportResponse(status_code=response.status_code, body=response.text)
