"""
基础设施容器（InfraContainer）

管理 HTTP 传输实现。
依赖 ConfigContainer 获取配置。
"""

from dependency_injector import containers, providers

from infrastructure.mail.transport.httpx_mail_transport import (
    AsyncHttpxMailTransport,
    HttpxMailTransport,
)


class InfraContainer(containers.DeclarativeContainer):
    """基础设施容器 - 管理技术实现"""

    # 依赖配置容器
    config = providers.DependenciesContainer()

    # ============ HTTP 传输 ============

    mail_transport = providers.Singleton(
        HttpxMailTransport,
        timeout=config.settings.provided.mailtrap_timeout,
    )

    async_mail_transport = providers.Singleton(
        AsyncHttpxMailTransport,
        timeout=config.settings.provided.mailtrap_timeout,
    )
