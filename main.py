"""
Mailtrap Client - 示例发送程序

运行：
    MAILTRAP_API_KEY=xxx uv run python main.py --to someone@example.com

附件：
    uv run python main.py --to someone@example.com --attachment welcome.png
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from domain.common.exceptions import MailClientException
from domain.mail.entities.mail import Mail
from domain.mail.services.mail_builder import MailBuilder
from infrastructure.config.settings import get_settings
from infrastructure.containers import create_bootstrap
from infrastructure.logging import setup_logging

logger = logging.getLogger("mailtrap")

DEFAULT_FROM_EMAIL = "mailtrap@demomailtrap.com"
DEFAULT_FROM_NAME = "Mailtrap Test"
DEFAULT_SUBJECT = "You are awesome!"
DEFAULT_TEXT = "Congrats for sending test email with Mailtrap!"
DEFAULT_CATEGORY = "Integration Test"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Send a test email through Mailtrap")
    parser.add_argument("--to", action="append", required=True, help="收件人，可重复")
    parser.add_argument("--from-email", default=DEFAULT_FROM_EMAIL)
    parser.add_argument("--from-name", default=DEFAULT_FROM_NAME)
    parser.add_argument("--subject", default=DEFAULT_SUBJECT)
    parser.add_argument("--text", default=DEFAULT_TEXT)
    parser.add_argument("--html", default=None)
    parser.add_argument("--category", default=DEFAULT_CATEGORY)
    parser.add_argument(
        "--attachment", action="append", default=[], help="附件路径，可重复"
    )
    return parser.parse_args(argv)


def build_mail(args: argparse.Namespace) -> Mail:
    """根据命令行参数构建邮件，附件从磁盘读取"""
    builder = (
        MailBuilder()
        .with_from(args.from_email, args.from_name)
        .with_subject(args.subject)
        .with_text(args.text)
        .with_category(args.category)
    )
    if args.html:
        builder.with_html(args.html)

    for recipient in args.to:
        builder.with_to(recipient)

    for path in args.attachment:
        file_path = Path(path)
        builder.with_attachment(file_path.read_bytes(), file_path.name)

    return builder.build()


def main(argv: Optional[List[str]] = None) -> int:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    args = parse_args(argv)

    try:
        mail = build_mail(args)
        client = create_bootstrap(settings).app.mailtrap_client()
        client.send(mail)
    except (MailClientException, OSError) as e:
        logger.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
