"""
JSON 报告器 - 输出 JSON 格式报告
"""

import json
import sys
from typing import TextIO

from dql_format.core.scanner.models import ScanResult


class JsonReporter:
    """JSON 报告器"""

    def __init__(self, output: TextIO | None = None):
        self.output = output or sys.stdout

    def report(self, result: ScanResult, target: str) -> None:
        """生成 JSON 格式报告"""
        report_data = {
            "target": target,
            "commands": [
                {
                    "command": cmd.command,
                    "file_path": cmd.file_path,
                    "line_number": cmd.line_number,
                    "column_number": cmd.column_number,
                }
                for cmd in result.commands
            ],
            "summary": {
                "total_commands": len(result.commands),
                "files_scanned": result.files_scanned,
                "files_with_commands": len({cmd.file_path for cmd in result.commands}),
                "unreadable_files": result.unreadable_files,
            },
        }

        json_str = json.dumps(report_data, indent=2, ensure_ascii=False)
        print(json_str, file=self.output)
