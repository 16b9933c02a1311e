"""Mailtrap 发送客户端"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Optional
import logging

from domain.common.exceptions import ConfigurationError
from domain.mail.entities.mail import Mail
from domain.mail.exceptions import HttpError, TransportError
from domain.mail.services.mail_json_builder import MailJsonBuilder
from domain.mail.services.mail_transport import (
    AsyncMailTransport,
    MailTransport,
    TransportResponse,
)
from domain.mail.services.mail_validator import MailValidator

if TYPE_CHECKING:
    from infrastructure.config.settings import Settings


@dataclass(frozen=True)
class MailtrapConfiguration:
    """Mailtrap 客户端配置

    Attributes:
        api_base_url: API 基础 URL，例如 https://send.api.mailtrap.io
        api_key: API 密钥（Bearer token）
    """

    api_base_url: str
    api_key: str

    SEND_PATH = "/api/send"

    def __post_init__(self) -> None:
        if not self.api_base_url:
            raise ConfigurationError("api_base_url")
        if not self.api_key:
            raise ConfigurationError("api_key")

    @classmethod
    def from_settings(cls, settings: "Settings") -> "MailtrapConfiguration":
        """从 Settings 构建配置"""
        return cls(
            api_base_url=settings.mailtrap_api_base_url,
            api_key=settings.mailtrap_api_key,
        )

    @property
    def send_url(self) -> str:
        """发送接口完整 URL"""
        return f"{self.api_base_url.rstrip('/')}{self.SEND_PATH}"

    def __repr__(self) -> str:
        return f"MailtrapConfiguration(api_base_url={self.api_base_url!r}, api_key='***')"


class MailtrapClient:
    """Mailtrap 发送客户端

    负责一次完整的发送流程：

    - 校验邮件（MailValidator）
    - 序列化为 JSON（MailJsonBuilder）
    - 通过 MailTransport 发送单次 POST 请求
    - 检查状态码，返回响应正文

    不做重试。所有失败都向调用方传播。
    """

    def __init__(
        self,
        configuration: MailtrapConfiguration,
        transport: Optional[MailTransport] = None,
        async_transport: Optional[AsyncMailTransport] = None,
        validator: Optional[MailValidator] = None,
        json_builder: Optional[MailJsonBuilder] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """初始化客户端

        Args:
            configuration: 客户端配置
            transport: 同步 HTTP 传输
            async_transport: 异步 HTTP 传输（send_async 需要）
            validator: 邮件校验器
            json_builder: JSON 序列化器
            logger: 日志记录器
        """
        self._configuration = configuration
        self._transport = transport
        self._async_transport = async_transport
        self._validator = validator or MailValidator()
        self._json_builder = json_builder or MailJsonBuilder()
        self._logger = logger or logging.getLogger(__name__)

    def send(self, mail: Mail) -> str:
        """发送邮件

        Args:
            mail: 待发送的邮件

        Returns:
            API 响应正文

        Raises:
            MailValidationError: 邮件缺少必填项（不会发出请求）
            HttpError: API 返回非 2xx 状态码
            TransportError: 网络层失败
        """
        if self._transport is None:
            raise ConfigurationError("transport", "Sync transport is not configured")

        body = self._prepare(mail)
        try:
            response = self._transport.post(
                self._configuration.send_url, body, self._headers()
            )
        except TransportError as e:
            self._logger.error(f"Mail send failed: {e.message}")
            raise
        return self._handle_response(response)

    async def send_async(self, mail: Mail) -> str:
        """异步发送邮件，语义与 send 相同"""
        if self._async_transport is None:
            raise ConfigurationError("async_transport", "Async transport is not configured")

        body = self._prepare(mail)
        try:
            response = await self._async_transport.post(
                self._configuration.send_url, body, self._headers()
            )
        except TransportError as e:
            self._logger.error(f"Mail send failed: {e.message}")
            raise
        return self._handle_response(response)

    def _prepare(self, mail: Mail) -> str:
        self._validator.validate(mail)
        body = self._json_builder.build(mail)
        self._logger.debug(
            f"Sending mail to {len(mail.to)} recipient(s) via "
            f"{self._configuration.send_url}"
        )
        return body

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self._configuration.api_key}",
            "Content-Type": "application/json",
        }

    def _handle_response(self, response: TransportResponse) -> str:
        if not response.is_success:
            self._logger.error(f"Mail send failed: HTTP {response.status_code}")
            raise HttpError(response.status_code, response.body)

        self._logger.info(f"Mail sent: {response.body}")
        return response.body
