"""邮件领域模块

该模块包含发送事务邮件的领域模型，包括：
- Mail 聚合与 Address / Attachment 值对象
- MailBuilder 构建器
- MailValidator 校验服务
- MailJsonBuilder 序列化服务
- MailTransport 传输接口
"""
