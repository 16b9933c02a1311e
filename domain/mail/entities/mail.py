"""邮件聚合"""

from dataclasses import dataclass, field
from typing import List, Optional

from domain.mail.value_objects.address import Address
from domain.mail.value_objects.attachment import Attachment


@dataclass
class Mail:
    """
    邮件聚合

    纯数据容器，由 MailBuilder 逐步填充，不做自我校验。
    发送前由 MailValidator 统一校验。

    Attributes:
        from_address: 发件人
        to: 收件人列表（保持添加顺序）
        subject: 邮件主题
        text: 纯文本正文（可选）
        html: HTML 正文（可选）
        category: 邮件分类标签（可选）
        attachments: 附件列表（保持添加顺序）
    """

    from_address: Optional[Address] = None
    to: List[Address] = field(default_factory=list)
    subject: Optional[str] = None
    text: Optional[str] = None
    html: Optional[str] = None
    category: Optional[str] = None
    attachments: List[Attachment] = field(default_factory=list)

    @property
    def has_text(self) -> bool:
        """检查是否有纯文本内容"""
        return bool(self.text)

    @property
    def has_html(self) -> bool:
        """检查是否有 HTML 内容"""
        return bool(self.html)

    @property
    def has_attachments(self) -> bool:
        """检查是否有附件"""
        return bool(self.attachments)
