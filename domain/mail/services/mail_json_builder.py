"""邮件 JSON 序列化服务"""

import json
from typing import Any, Dict

from domain.mail.entities.mail import Mail
from domain.mail.value_objects.address import Address
from domain.mail.value_objects.attachment import Attachment


class MailJsonBuilder:
    """
    将邮件序列化为 Mailtrap Send API 的请求体

    输出字段顺序固定：from, to, subject, text, html, category, attachments。
    空的可选字段不输出（既不是 null 也不是空字符串）。
    非 ASCII 字符统一输出为 \\uXXXX 转义，请求体始终是纯 ASCII。
    输入应为已通过 MailValidator 校验的邮件。
    """

    def build(self, mail: Mail) -> str:
        """序列化为 JSON 字符串

        Args:
            mail: 已校验的邮件

        Returns:
            JSON 请求体
        """
        return json.dumps(self.build_payload(mail))

    def build_payload(self, mail: Mail) -> Dict[str, Any]:
        """构建请求体字典（保持字段顺序）"""
        payload: Dict[str, Any] = {
            "from": self._address(mail.from_address),  # type: ignore[arg-type]
            "to": [self._address(address) for address in mail.to],
            "subject": mail.subject,
        }

        if mail.has_text:
            payload["text"] = mail.text
        if mail.has_html:
            payload["html"] = mail.html
        if mail.category:
            payload["category"] = mail.category
        if mail.has_attachments:
            payload["attachments"] = [
                self._attachment(attachment) for attachment in mail.attachments
            ]

        return payload

    @staticmethod
    def _address(address: Address) -> Dict[str, str]:
        result = {"email": address.email}
        if address.has_name:
            result["name"] = address.name
        return result

    @staticmethod
    def _attachment(attachment: Attachment) -> Dict[str, str]:
        return {
            "content": attachment.encoded_content(),
            "filename": attachment.file_name,
        }
