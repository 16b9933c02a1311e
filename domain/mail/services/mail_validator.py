"""邮件校验服务"""

from dataclasses import dataclass
from typing import Optional

from domain.mail.entities.mail import Mail
from domain.mail.exceptions import MailValidationError


@dataclass
class ValidationResult:
    """校验结果

    Attributes:
        ok: 是否通过校验
        mail: 被校验的邮件
        error: 校验错误（失败时）
    """

    ok: bool
    mail: Mail
    error: Optional[MailValidationError] = None


class MailValidator:
    """
    邮件校验服务

    按固定顺序检查必填项：From -> To -> Subject -> Text/Html -> Attachments，
    遇到第一个违规项立即失败。
    """

    def validate(self, mail: Mail) -> None:
        """校验邮件

        Args:
            mail: 待校验的邮件

        Raises:
            MailValidationError: 任意必填项缺失
        """
        if mail.from_address is None or not mail.from_address.email:
            raise MailValidationError("from", "From is required")
        if not mail.to or any(not address.email for address in mail.to):
            raise MailValidationError("to", "To is required")
        if not mail.subject:
            raise MailValidationError("subject", "Subject is required")
        if not mail.has_text and not mail.has_html:
            raise MailValidationError("text", "Text or Html is required")
        if any(not attachment.has_content for attachment in mail.attachments or []):
            raise MailValidationError(
                "attachments", "Attachment content is required"
            )

    def check(self, mail: Mail) -> ValidationResult:
        """校验邮件但不抛出异常

        Args:
            mail: 待校验的邮件

        Returns:
            ValidationResult，失败时 error 为对应的 MailValidationError
        """
        try:
            self.validate(mail)
        except MailValidationError as e:
            return ValidationResult(ok=False, mail=mail, error=e)
        return ValidationResult(ok=True, mail=mail)
