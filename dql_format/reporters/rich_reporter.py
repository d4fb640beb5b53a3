"""
Rich 终端报告器 - 使用 Rich 库输出彩色终端表格
"""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from dql_format.core.scanner.models import ScanResult

# 命令过长时截断显示
MAX_COMMAND_WIDTH = 100


class RichReporter:
    """Rich 终端报告器"""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def report(self, result: ScanResult, target: str) -> None:
        """生成 Rich 格式报告"""
        self.console.print()
        if result.commands:
            self._print_commands(result)
        self._print_summary(result, target)

    def _print_commands(self, result: ScanResult) -> None:
        table = Table(show_header=True, header_style="bold cyan", box=None)
        table.add_column("#", justify="right", style="dim")
        table.add_column("位置", style="cyan", no_wrap=True)
        table.add_column("DQL 命令")

        for i, cmd in enumerate(result.commands, 1):
            text = cmd.command
            if len(text) > MAX_COMMAND_WIDTH:
                text = text[:MAX_COMMAND_WIDTH - 1] + "…"
            table.add_row(
                str(i),
                f"{cmd.file_path}:{cmd.line_number}:{cmd.column_number}",
                # Text 避免 DQL 里的方括号被当作 Rich 标记
                Text(text, style="green"),
            )

        self.console.print(table)
        self.console.print()

    def _print_summary(self, result: ScanResult, target: str) -> None:
        files_with_commands = len({cmd.file_path for cmd in result.commands})
        color = "green" if result.commands else "yellow"

        content = Text()
        content.append("DQL 命令: ", style="bold")
        content.append(f"{len(result.commands)}\n", style=f"bold {color}")
        content.append(f"扫描文件: {result.files_scanned}", style="dim")
        content.append(f"  含命令文件: {files_with_commands}\n", style="dim")
        if result.unreadable_files:
            content.append(f"无法读取: {len(result.unreadable_files)}\n", style="yellow")
        content.append(f"目标: {target}", style="dim")

        self.console.print(Panel(
            content,
            title="[bold]📋 dql-format[/bold]",
            border_style=color,
        ))
        self.console.print()
