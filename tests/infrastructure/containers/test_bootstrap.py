"""依赖注入容器测试"""

import pytest

from application.mail.services.mailtrap_client import MailtrapClient, MailtrapConfiguration
from domain.common.exceptions import ConfigurationError
from infrastructure.config.settings import Settings
from infrastructure.containers import create_bootstrap
from infrastructure.mail.transport.httpx_mail_transport import (
    AsyncHttpxMailTransport,
    HttpxMailTransport,
)


def make_settings(**overrides) -> Settings:
    values = {
        "mailtrap_api_base_url": "https://send.api.mailtrap.io",
        "mailtrap_api_key": "container-key",
        "mailtrap_timeout": 12.5,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class TestBootstrap:
    """容器组装测试"""

    def test_client_is_wired(self):
        """测试 MailtrapClient 从容器获取"""
        bootstrap = create_bootstrap(make_settings())

        client = bootstrap.app.mailtrap_client()

        assert isinstance(client, MailtrapClient)
        assert bootstrap.app.mailtrap_client() is client

    def test_configuration_from_settings(self):
        """测试配置从 Settings 读取"""
        bootstrap = create_bootstrap(make_settings())

        configuration = bootstrap.app.mailtrap_configuration()

        assert isinstance(configuration, MailtrapConfiguration)
        assert configuration.api_key == "container-key"
        assert configuration.send_url == "https://send.api.mailtrap.io/api/send"

    def test_transports_use_configured_timeout(self):
        """测试传输使用配置的超时时间"""
        bootstrap = create_bootstrap(make_settings())

        transport = bootstrap.infra.mail_transport()
        async_transport = bootstrap.infra.async_mail_transport()

        assert isinstance(transport, HttpxMailTransport)
        assert isinstance(async_transport, AsyncHttpxMailTransport)
        assert transport._timeout == 12.5
        assert async_transport._timeout == 12.5

    def test_missing_api_key_fails_on_resolve(self):
        """测试缺少 API 密钥时获取客户端报错"""
        bootstrap = create_bootstrap(make_settings(mailtrap_api_key=""))

        with pytest.raises(ConfigurationError, match="api_key"):
            bootstrap.app.mailtrap_client()
