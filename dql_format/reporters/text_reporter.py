"""
纯文本报告器 - 每条 DQL 命令一行，便于管道处理
"""

import sys
from typing import TextIO

from dql_format.core.scanner.core import format_dql_command
from dql_format.core.scanner.models import ScanResult


class TextReporter:
    """纯文本报告器"""

    def __init__(self, output: TextIO | None = None, ide_format: bool = False):
        self.output = output or sys.stdout
        self.ide_format = ide_format

    def report(self, result: ScanResult, target: str) -> None:
        for command in result.commands:
            print(format_dql_command(command, self.ide_format), file=self.output)
