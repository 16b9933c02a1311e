"""邮件构建器"""

from typing import Optional

from domain.mail.entities.mail import Mail
from domain.mail.value_objects.address import Address
from domain.mail.value_objects.attachment import Attachment


class MailBuilder:
    """
    邮件流式构建器

    每个 with_* 方法修改内部的 Mail 并返回构建器本身，便于链式调用。
    本层不做任何校验，不完整的邮件也可以 build()。

    用法：
        mail = (
            MailBuilder()
            .with_from("sender@example.com", "Sender")
            .with_to("recipient@example.com")
            .with_subject("Hello")
            .with_text("Body")
            .build()
        )
    """

    def __init__(self) -> None:
        self._mail = Mail()

    def with_from(self, email: str, name: Optional[str] = None) -> "MailBuilder":
        """设置发件人，重复调用时以最后一次为准"""
        self._mail.from_address = Address(email=email, name=name)
        return self

    def with_to(self, email: str, name: Optional[str] = None) -> "MailBuilder":
        """追加一个收件人"""
        self._mail.to.append(Address(email=email, name=name))
        return self

    def with_subject(self, subject: str) -> "MailBuilder":
        self._mail.subject = subject
        return self

    def with_text(self, text: str) -> "MailBuilder":
        self._mail.text = text
        return self

    def with_html(self, html: str) -> "MailBuilder":
        self._mail.html = html
        return self

    def with_category(self, category: str) -> "MailBuilder":
        self._mail.category = category
        return self

    def with_attachment(self, content: bytes, file_name: str) -> "MailBuilder":
        """追加一个附件"""
        self._mail.attachments.append(
            Attachment(content=content, file_name=file_name)
        )
        return self

    def build(self) -> Mail:
        """
        返回构建完成的邮件

        邮件的所有权转移给调用方；之后的 with_* 调用作用于一份新的副本，
        不会修改已返回的 Mail。

        Returns:
            Mail 实例（未经校验）
        """
        mail = self._mail
        self._mail = Mail(
            from_address=mail.from_address,
            to=list(mail.to),
            subject=mail.subject,
            text=mail.text,
            html=mail.html,
            category=mail.category,
            attachments=list(mail.attachments),
        )
        return mail
