"""
dql-format: 在源码字符串字面量中查找 DQL 查询表达式。
"""

__version__ = "0.1.0"
