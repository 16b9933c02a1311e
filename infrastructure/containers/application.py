"""
应用容器（AppContainer）

管理应用层组件：MailtrapClient 及其配置。
依赖 InfraContainer 获取 HTTP 传输。
"""

from dependency_injector import containers, providers

from application.mail.services.mailtrap_client import MailtrapClient, MailtrapConfiguration


class AppContainer(containers.DeclarativeContainer):
    """应用容器 - 管理应用层服务"""

    # 依赖配置容器
    config = providers.DependenciesContainer()

    # 依赖基础设施容器
    infra = providers.DependenciesContainer()

    # ============ Mailtrap ============

    mailtrap_configuration = providers.Singleton(
        MailtrapConfiguration.from_settings,
        settings=config.settings,
    )

    mailtrap_client = providers.Singleton(
        MailtrapClient,
        configuration=mailtrap_configuration,
        transport=infra.mail_transport,
        async_transport=infra.async_mail_transport,
    )
