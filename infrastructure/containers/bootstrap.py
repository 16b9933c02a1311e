"""
容器引导

按 Config -> Infra -> App 的顺序组装容器。
"""

from typing import Optional

from infrastructure.config.settings import Settings
from infrastructure.containers.application import AppContainer
from infrastructure.containers.config import ConfigContainer
from infrastructure.containers.infrastructure import InfraContainer


class Bootstrap:
    """容器引导器

    Attributes:
        config: 配置容器
        infra: 基础设施容器
        app: 应用容器
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        初始化并连接所有容器

        Args:
            settings: 覆盖默认配置（测试用），默认从环境变量读取
        """
        self.config = ConfigContainer()
        if settings is not None:
            self.config.settings.override(settings)

        self.infra = InfraContainer(config=self.config)
        self.app = AppContainer(config=self.config, infra=self.infra)


def create_bootstrap(settings: Optional[Settings] = None) -> Bootstrap:
    """创建容器引导器"""
    return Bootstrap(settings=settings)
