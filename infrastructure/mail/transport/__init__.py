"""HTTP 传输实现"""

from infrastructure.mail.transport.httpx_mail_transport import (
    AsyncHttpxMailTransport,
    HttpxMailTransport,
)

__all__ = ["HttpxMailTransport", "AsyncHttpxMailTransport"]
