"""邮件地址值对象"""

from dataclasses import dataclass
from typing import Optional

from domain.common.base_value_object import BaseValueObject


@dataclass(frozen=True)
class Address(BaseValueObject):
    """
    邮件地址值对象

    Attributes:
        email: 邮箱地址
        name: 显示名称（可选）
    """

    email: str
    name: Optional[str] = None

    @property
    def has_name(self) -> bool:
        """检查是否有显示名称"""
        return bool(self.name)
