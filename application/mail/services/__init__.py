"""邮件应用服务"""

from application.mail.services.mailtrap_client import MailtrapClient, MailtrapConfiguration

__all__ = ["MailtrapClient", "MailtrapConfiguration"]
