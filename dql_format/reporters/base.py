"""
报告器基类 - 定义报告器接口
"""

from typing import Protocol

from dql_format.core.scanner.models import ScanResult


class Reporter(Protocol):
    """报告器协议"""

    def report(self, result: ScanResult, target: str) -> None:
        """生成报告"""
        ...
