"""
Scanner 模块 - 从源文本中提取 DQL 表达式

模块化结构：
- models.py: 数据类定义
- tokenizer.py: 字面量分词状态机
- vocabulary.py: DQL 命令词表
- classifier.py: DQL 内容分类
- core.py: 提取管道与文件扫描
"""

from dql_format.core.scanner.models import (
    LiteralToken,
    DqlCommand,
    ScanResult,
)
from dql_format.core.scanner.tokenizer import (
    Mode,
    ScanState,
    Transition,
    step,
    iter_literals,
    extract_strings,
)
from dql_format.core.scanner.vocabulary import (
    ROOT_COMMANDS,
    TRANSFORMATION_COMMANDS,
    LITERAL_DELIMITERS,
    EXTENSION_TO_LANGUAGE,
)
from dql_format.core.scanner.classifier import (
    unwrap_literal,
    leading_command,
    is_dql_content,
)
from dql_format.core.scanner.core import (
    extract_dql_commands,
    find_dql_commands,
    scan_file,
    scan_code_files,
    format_dql_command,
)

__all__ = [
    # Models
    "LiteralToken",
    "DqlCommand",
    "ScanResult",
    # Tokenizer
    "Mode",
    "ScanState",
    "Transition",
    "step",
    "iter_literals",
    "extract_strings",
    # Vocabulary
    "ROOT_COMMANDS",
    "TRANSFORMATION_COMMANDS",
    "LITERAL_DELIMITERS",
    "EXTENSION_TO_LANGUAGE",
    # Classifier
    "unwrap_literal",
    "leading_command",
    "is_dql_content",
    # Core
    "extract_dql_commands",
    "find_dql_commands",
    "scan_file",
    "scan_code_files",
    "format_dql_command",
]
