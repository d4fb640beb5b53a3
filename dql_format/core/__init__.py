"""
Core Layer - 核心层

字面量分词器、DQL 分类器与提取管道。
"""

from dql_format.core.scanner import (
    extract_strings,
    is_dql_content,
    extract_dql_commands,
    find_dql_commands,
    scan_file,
    scan_code_files,
    format_dql_command,
    DqlCommand,
    ScanResult,
)

__all__ = [
    "extract_strings",
    "is_dql_content",
    "extract_dql_commands",
    "find_dql_commands",
    "scan_file",
    "scan_code_files",
    "format_dql_command",
    "DqlCommand",
    "ScanResult",
]
