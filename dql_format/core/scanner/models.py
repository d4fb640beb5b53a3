"""
数据模型定义

包含扫描器使用的所有数据类。
"""

import json
from dataclasses import dataclass, field, asdict


@dataclass(frozen=True)
class LiteralToken:
    """
    字面量 token

    Attributes:
        text: 原始文本，包含首尾定界符，转义保持原样
        offset: 起始定界符在源文本中的位置 (0-based)
    """
    text: str
    offset: int


@dataclass
class DqlCommand:
    """
    DQL 命令记录

    Attributes:
        command: 去掉外层定界符后的 DQL 表达式
        file_path: 源文件路径
        line_number: 行号 (1-based)
        column_number: 列号 (0-based)
    """
    command: str
    file_path: str
    line_number: int
    column_number: int = 0


@dataclass
class ScanResult:
    """
    扫描结果

    Attributes:
        commands: 按文件顺序、文件内按出现顺序排列的 DQL 命令
        files_scanned: 已扫描的文件数量
        unreadable_files: 无法读取而被跳过的文件
    """
    commands: list[DqlCommand] = field(default_factory=list)
    files_scanned: int = 0
    unreadable_files: list[str] = field(default_factory=list)

    def to_json(self) -> str:
        """序列化为 JSON 字符串"""
        data = {
            "commands": [asdict(cmd) for cmd in self.commands],
            "files_scanned": self.files_scanned,
            "unreadable_files": list(self.unreadable_files),
        }
        return json.dumps(data, ensure_ascii=False, indent=2)

    @classmethod
    def from_json(cls, json_str: str) -> "ScanResult":
        """从 JSON 字符串反序列化"""
        data = json.loads(json_str)
        return cls(
            commands=[DqlCommand(**cmd) for cmd in data.get("commands", [])],
            files_scanned=data.get("files_scanned", 0),
            unreadable_files=list(data.get("unreadable_files", [])),
        )
