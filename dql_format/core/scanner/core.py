"""
核心扫描函数

字面量分词 -> DQL 分类 -> 去掉定界符，以及文件/目录层面的扫描。
"""

import logging
from pathlib import Path
from typing import Callable, Optional

from dql_format.core.scanner.classifier import is_dql_content, unwrap_literal
from dql_format.core.scanner.models import DqlCommand, ScanResult
from dql_format.core.scanner.tokenizer import iter_literals
from dql_format.core.scanner.vocabulary import EXTENSION_TO_LANGUAGE
from dql_format.filters import PathspecFilter

logger = logging.getLogger(__name__)

# 进度回调类型
ProgressCallback = Callable[[str, str], None]


def extract_dql_commands(content: str) -> list[str]:
    """提取文本中所有 DQL 表达式（按出现顺序，不去重）"""
    return [
        unwrap_literal(token.text)
        for token in iter_literals(content)
        if is_dql_content(token.text)
    ]


def _position(content: str, offset: int) -> tuple[int, int]:
    """偏移量 -> (行号 1-based, 列号 0-based)"""
    line_start = content.rfind("\n", 0, offset) + 1
    return content.count("\n", 0, offset) + 1, offset - line_start


def find_dql_commands(content: str, file_path: str) -> list[DqlCommand]:
    """提取 DQL 表达式并附带位置信息"""
    commands: list[DqlCommand] = []
    for token in iter_literals(content):
        if not is_dql_content(token.text):
            continue
        line, col = _position(content, token.offset)
        commands.append(DqlCommand(
            command=unwrap_literal(token.text),
            file_path=file_path,
            line_number=line,
            column_number=col,
        ))
    return commands


def scan_file(path: Path, display_path: Optional[str] = None) -> list[DqlCommand]:
    """
    扫描单个文件

    文件不存在时抛出 FileNotFoundError，读取失败时抛出 OSError / UnicodeDecodeError，
    由调用方决定如何处理。
    """
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    # 按字节解码，保留 \r\n 和单独的 \r
    content = path.read_bytes().decode("utf-8")
    return find_dql_commands(content, display_path or str(path))


def _walk(directory: Path, path_filter: PathspecFilter, extensions: set[str]):
    """按名称顺序遍历目录，被忽略的子目录不会进入"""
    path_filter.load_directory(directory)
    try:
        entries = sorted(directory.iterdir())
    except OSError as e:
        logger.warning(f"Failed to list {directory}: {e}")
        return

    for entry in entries:
        try:
            if entry.is_dir():
                if not path_filter.should_ignore(entry, is_dir=True):
                    yield from _walk(entry, path_filter, extensions)
            elif entry.is_file():
                if entry.suffix.lower() in extensions and not path_filter.should_ignore(entry):
                    yield entry
        except OSError:
            continue


def _iter_source_files(root: Path, extensions: set[str]):
    yield from _walk(root, PathspecFilter(root), extensions)


def scan_code_files(
    root: Path,
    extensions: Optional[list[str]] = None,
    on_file: Optional[ProgressCallback] = None,
) -> ScanResult:
    """递归扫描目录下的源文件"""
    result = ScanResult()

    if extensions is None:
        extensions = list(EXTENSION_TO_LANGUAGE.keys())
    wanted = {ext.lower() for ext in extensions}

    for file_path in _iter_source_files(root, wanted):
        rel_path = file_path.relative_to(root).as_posix()

        try:
            commands = scan_file(file_path, rel_path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read {rel_path}: {e}")
            result.unreadable_files.append(rel_path)
            continue

        if on_file:
            on_file(rel_path, EXTENSION_TO_LANGUAGE.get(file_path.suffix.lower(), "unknown"))

        result.files_scanned += 1
        result.commands.extend(commands)

    return result


def format_dql_command(command: DqlCommand, ide_format: bool = False) -> str:
    """将 DqlCommand 格式化为输出行"""
    if ide_format:
        return f"{command.file_path}:{command.line_number}:{command.column_number}: {command.command}"
    # TODO: 接入真正的 DQL 格式化器后替换这个占位输出
    return f"dql-format: {command.command}"
