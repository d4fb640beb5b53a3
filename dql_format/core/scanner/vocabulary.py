"""
DQL 命令词表

两个固定、互不相交、区分大小写的命令集合。
"""

# 可以直接开始 DQL 表达式的命令（不需要前导管道符）
ROOT_COMMANDS: frozenset[str] = frozenset({
    # 数据源
    "data",
    "describe",
    "fetch",
    "load",
    # 指标
    "timeseries",
    "metrics",
})

# 只能出现在管道符 | 之后的命令
TRANSFORMATION_COMMANDS: frozenset[str] = frozenset({
    # 过滤与搜索
    "dedup",
    "filter",
    "filterOut",
    "search",
    # 字段选择与修改
    "fields",
    "fieldsAdd",
    "fieldsKeep",
    "fieldsRemove",
    "fieldsRename",
    # 解析
    "parse",
    # 排序
    "limit",
    "sort",
    # 结构化
    "expand",
    "fieldsFlatten",
    # 聚合
    "fieldsSummary",
    "makeTimeseries",
    "summarize",
    # 关联与 join
    "append",
    "join",
    "joinNested",
    "lookup",
    # Smartscape
    "smartscapeNodes",
    "smartscapeEdges",
    "traverse",
})


def check_disjoint(root: frozenset[str], transformation: frozenset[str]) -> None:
    """两个命令集合不能有交集"""
    overlap = root & transformation
    if overlap:
        raise RuntimeError(f"command vocabularies overlap: {sorted(overlap)}")


check_disjoint(ROOT_COMMANDS, TRANSFORMATION_COMMANDS)

# 前导空白：与 ECMAScript trimStart() 相同的空白和行终止符集合
LEADING_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

PIPE = "|"

# 字面量定界符
LITERAL_DELIMITERS: frozenset[str] = frozenset({'"', "'", "`"})

# 目录扫描时收集的文件扩展名
EXTENSION_TO_LANGUAGE: dict[str, str] = {
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".ts": "typescript",
    ".tsx": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".py": "python",
    ".java": "java",
    ".kt": "kotlin",
    ".go": "go",
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}
