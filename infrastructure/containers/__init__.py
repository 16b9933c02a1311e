"""
依赖注入容器

容器层次：
- ConfigContainer: 配置
- InfraContainer: HTTP 传输等基础设施
- AppContainer: MailtrapClient 等应用服务
"""

from infrastructure.containers.bootstrap import Bootstrap, create_bootstrap

__all__ = ["Bootstrap", "create_bootstrap"]
