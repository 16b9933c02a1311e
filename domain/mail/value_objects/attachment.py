"""邮件附件值对象"""

from base64 import b64encode
from dataclasses import dataclass

from domain.common.base_value_object import BaseValueObject


@dataclass(frozen=True)
class Attachment(BaseValueObject):
    """
    邮件附件值对象

    附件内容以原始字节保存，仅在序列化时进行 base64 编码。

    Attributes:
        content: 附件二进制内容
        file_name: 文件名
    """

    content: bytes
    file_name: str

    @property
    def has_content(self) -> bool:
        """检查附件内容是否非空"""
        return self.content is not None and len(self.content) > 0

    def encoded_content(self) -> str:
        """返回 base64 编码后的内容"""
        return b64encode(self.content or b"").decode("ascii")
