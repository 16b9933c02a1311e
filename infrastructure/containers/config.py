"""
配置容器（ConfigContainer）

提供 Settings 单例，供其它容器读取配置。
"""

from dependency_injector import containers, providers

from infrastructure.config.settings import get_settings


class ConfigContainer(containers.DeclarativeContainer):
    """配置容器"""

    settings = providers.Singleton(get_settings)
