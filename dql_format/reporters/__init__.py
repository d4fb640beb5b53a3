"""
Reporters Layer - 报告层

包含纯文本、Rich 终端和 JSON 报告器。
"""

from dql_format.reporters.base import Reporter
from dql_format.reporters.text_reporter import TextReporter
from dql_format.reporters.rich_reporter import RichReporter
from dql_format.reporters.json_reporter import JsonReporter

__all__ = [
    "Reporter",
    "TextReporter",
    "RichReporter",
    "JsonReporter",
]
