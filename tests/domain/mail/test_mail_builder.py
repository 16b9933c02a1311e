"""MailBuilder 单元测试"""

from domain.mail.entities.mail import Mail
from domain.mail.services.mail_builder import MailBuilder
from domain.mail.value_objects.address import Address
from domain.mail.value_objects.attachment import Attachment


class TestMailBuilderChaining:
    """MailBuilder 链式调用测试"""

    def test_each_setter_returns_same_builder(self):
        """测试每个 with_* 方法返回构建器本身"""
        builder = MailBuilder()

        assert builder.with_from("a@x.com") is builder
        assert builder.with_to("b@x.com") is builder
        assert builder.with_subject("Hi") is builder
        assert builder.with_text("Body") is builder
        assert builder.with_html("<p>Body</p>") is builder
        assert builder.with_category("Test") is builder
        assert builder.with_attachment(b"data", "a.txt") is builder

    def test_build_full_mail(self):
        """测试构建包含所有字段的邮件"""
        mail = (
            MailBuilder()
            .with_from("sender@example.com", "Sender")
            .with_to("recipient@example.com", "Recipient")
            .with_subject("Subject")
            .with_text("Text body")
            .with_html("<p>HTML body</p>")
            .with_category("Integration Test")
            .with_attachment(b"\x89PNG", "welcome.png")
            .build()
        )

        assert isinstance(mail, Mail)
        assert mail.from_address == Address("sender@example.com", "Sender")
        assert mail.to == [Address("recipient@example.com", "Recipient")]
        assert mail.subject == "Subject"
        assert mail.text == "Text body"
        assert mail.html == "<p>HTML body</p>"
        assert mail.category == "Integration Test"
        assert mail.attachments == [Attachment(b"\x89PNG", "welcome.png")]


class TestMailBuilderAccumulation:
    """MailBuilder 字段累积测试"""

    def test_with_to_appends_in_call_order(self):
        """测试多次 with_to 按调用顺序追加收件人"""
        mail = (
            MailBuilder()
            .with_to("one@example.com")
            .with_to("two@example.com", "Two")
            .with_to("three@example.com")
            .build()
        )

        assert len(mail.to) == 3
        assert [a.email for a in mail.to] == [
            "one@example.com",
            "two@example.com",
            "three@example.com",
        ]
        assert mail.to[1].name == "Two"

    def test_with_from_last_call_wins(self):
        """测试重复 with_from 只保留最后一次"""
        mail = (
            MailBuilder()
            .with_from("first@example.com", "First")
            .with_from("second@example.com")
            .build()
        )

        assert mail.from_address == Address("second@example.com")

    def test_scalar_setters_overwrite(self):
        """测试标量字段重复设置时覆盖"""
        mail = MailBuilder().with_subject("Old").with_subject("New").build()

        assert mail.subject == "New"

    def test_attachments_append_in_order(self):
        """测试附件按顺序追加"""
        mail = (
            MailBuilder()
            .with_attachment(b"1", "welcome.png")
            .with_attachment(b"2", "welcome2.png")
            .build()
        )

        assert [a.file_name for a in mail.attachments] == ["welcome.png", "welcome2.png"]


class TestMailBuilderBuild:
    """MailBuilder.build() 测试"""

    def test_build_empty_mail_does_not_validate(self):
        """测试不完整的邮件也可以构建"""
        mail = MailBuilder().build()

        assert mail.from_address is None
        assert mail.to == []
        assert mail.subject is None
        assert mail.attachments == []

    def test_built_mail_is_not_mutated_by_later_calls(self):
        """测试 build() 之后继续调用不会修改已返回的邮件"""
        builder = MailBuilder().with_to("one@example.com").with_subject("First")
        first = builder.build()

        builder.with_to("two@example.com").with_subject("Second")
        second = builder.build()

        assert [a.email for a in first.to] == ["one@example.com"]
        assert first.subject == "First"
        assert [a.email for a in second.to] == ["one@example.com", "two@example.com"]
        assert second.subject == "Second"
