"""邮件实体模块"""

from domain.mail.entities.mail import Mail

__all__ = ["Mail"]
