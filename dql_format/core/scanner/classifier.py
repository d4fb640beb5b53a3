"""
DQL 内容分类器

根据首个单词判断一个字面量是否为 DQL 表达式：
- 无前导管道符: 首个单词必须是根命令
- 有前导管道符: 首个单词必须是转换命令
"""

import re
from typing import Optional

from dql_format.core.scanner.vocabulary import (
    LEADING_WHITESPACE,
    LITERAL_DELIMITERS,
    PIPE,
    ROOT_COMMANDS,
    TRANSFORMATION_COMMANDS,
)

_LEADING_WORD = re.compile(r"[A-Za-z]+")


def unwrap_literal(raw: str) -> str:
    """去掉一对外层引号/反引号（首尾字符相同时）"""
    if len(raw) >= 2 and raw[0] == raw[-1] and raw[0] in LITERAL_DELIMITERS:
        return raw[1:-1]
    return raw


def leading_command(text: str) -> Optional[str]:
    """提取开头的连续字母串，没有则返回 None"""
    match = _LEADING_WORD.match(text)
    return match.group(0) if match else None


def is_dql_content(raw: str) -> bool:
    """判断字面量（可带定界符）是否为 DQL 表达式"""
    text = unwrap_literal(raw).lstrip(LEADING_WHITESPACE)
    if not text:
        return False

    if text[0] == PIPE:
        text = text[1:].lstrip(LEADING_WHITESPACE)
        if not text:
            return False
        return leading_command(text) in TRANSFORMATION_COMMANDS

    return leading_command(text) in ROOT_COMMANDS
