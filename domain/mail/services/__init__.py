"""邮件领域服务"""

from domain.mail.services.mail_builder import MailBuilder
from domain.mail.services.mail_json_builder import MailJsonBuilder
from domain.mail.services.mail_transport import (
    AsyncMailTransport,
    MailTransport,
    TransportResponse,
)
from domain.mail.services.mail_validator import MailValidator, ValidationResult

__all__ = [
    "MailBuilder",
    "MailJsonBuilder",
    "MailValidator",
    "ValidationResult",
    "MailTransport",
    "AsyncMailTransport",
    "TransportResponse",
]
