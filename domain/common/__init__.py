"""领域通用基础模块"""
