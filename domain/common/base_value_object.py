"""值对象基类"""

from dataclasses import dataclass


@dataclass(frozen=True)
class BaseValueObject:
    """
    值对象基类

    值对象没有身份标识，仅通过属性值判断相等。
    子类应使用 @dataclass(frozen=True) 保证不可变。
    """

    def __post_init__(self) -> None:
        """初始化后验证"""
        self.validate()

    def validate(self) -> None:
        """验证值对象的有效性，子类按需覆盖"""
