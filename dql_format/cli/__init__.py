"""
CLI Layer - 命令行接口层

提供命令行入口。
"""

from dql_format.cli.app import app, main

__all__ = [
    "app",
    "main",
]
