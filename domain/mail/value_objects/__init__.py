"""邮件值对象模块"""

from domain.mail.value_objects.address import Address
from domain.mail.value_objects.attachment import Attachment

__all__ = ["Address", "Attachment"]
