"""
CLI 入口模块 - 使用 Typer 构建命令行界面

处理流程：
1. 收集文件（单个文件或递归目录）
2. 读取文件并提取 DQL 表达式
3. 生成报告
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from dql_format.core import ScanResult, scan_code_files, scan_file
from dql_format.reporters import JsonReporter, Reporter, RichReporter, TextReporter

USAGE = "Usage: dql-format <filename>"

# 退出码
EXIT_USAGE = 1
EXIT_NOT_FOUND = 2
EXIT_READ_ERROR = 3

# 创建 Typer 应用实例
app = typer.Typer(
    name="dql-format",
    help="dql-format: find DQL queries embedded in source code string literals.",
    add_completion=False,
)

# 错误与日志输出到 stderr，stdout 只留给报告
err_console = Console(stderr=True, highlight=False, soft_wrap=True)


def setup_logging(verbose: bool) -> None:
    """配置日志：Rich 处理器输出到 stderr"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def get_reporter(format: str, ide_format: bool) -> Reporter:
    """获取对应的报告器"""
    if format == "json":
        return JsonReporter()
    if format == "rich":
        return RichReporter(Console())
    return TextReporter(ide_format=ide_format)


def _version_callback(value: bool) -> None:
    if value:
        from dql_format import __version__
        typer.echo(f"dql-format v{__version__}")
        raise typer.Exit()


def collect(paths: list[Path], verbose: bool = False) -> ScanResult:
    """扫描所有给定路径，遇到缺失文件或读取错误时退出"""
    result = ScanResult()

    for path in paths:
        if not path.exists():
            err_console.print(f"File not found: {path}", markup=False)
            raise typer.Exit(EXIT_NOT_FOUND)

        if path.is_dir():
            on_file = None
            if verbose:
                def on_file(file_path: str, language: str) -> None:
                    err_console.print(f"[dim]  ({language}) {escape(file_path)}[/dim]")

            dir_result = scan_code_files(path, on_file=on_file)
            result.commands.extend(dir_result.commands)
            result.files_scanned += dir_result.files_scanned
            result.unreadable_files.extend(dir_result.unreadable_files)
            continue

        try:
            commands = scan_file(path, str(path))
        except FileNotFoundError:
            err_console.print(f"File not found: {path}", markup=False)
            raise typer.Exit(EXIT_NOT_FOUND)
        except (OSError, UnicodeDecodeError) as e:
            err_console.print(f"Error reading file {path}: {e}", markup=False)
            raise typer.Exit(EXIT_READ_ERROR)

        result.files_scanned += 1
        result.commands.extend(commands)

    return result


@app.command()
def main(
    paths: Optional[list[Path]] = typer.Argument(
        None,
        help="Files or directories to scan",
        show_default=False,
    ),
    format: str = typer.Option(
        "text",
        "--format",
        "-f",
        help="Output format: text (default), rich or json",
    ),
    ide: bool = typer.Option(
        False,
        "--ide",
        help="Print text output as path:line:col: command",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show detailed output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """
    Print every DQL query found in string and template literals.

    Examples:
        dql-format src/queries.ts
        dql-format ./src --format rich
        dql-format app.js --ide
    """
    setup_logging(verbose)

    if not paths:
        err_console.print(USAGE)
        raise typer.Exit(EXIT_USAGE)

    if format not in ("text", "rich", "json"):
        err_console.print(f"[red]Error:[/red] Unknown format: {escape(format)}")
        raise typer.Exit(EXIT_USAGE)

    result = collect(paths, verbose)

    if verbose:
        err_console.print(
            f"[dim]Scanned {result.files_scanned} files, "
            f"found {len(result.commands)} DQL commands[/dim]"
        )

    target = ", ".join(str(p) for p in paths)
    get_reporter(format, ide).report(result, target)


if __name__ == "__main__":
    app()
