"""邮件基础设施模块"""
