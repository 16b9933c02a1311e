"""邮件应用模块"""
