"""
字面量分词器

单遍、从左到右扫描源文本，提取所有字符串字面量和模板字面量：
- 单引号 / 双引号字符串，支持反斜杠转义
- 反引号模板字符串，支持 ${...} 插值（只做花括号配平）

扫描器是一个显式有限状态机，状态集合固定：
OUTSIDE, IN_SINGLE, IN_DOUBLE, IN_TEMPLATE, IN_INTERPOLATION(depth)。
转移函数 step() 是 (状态, 当前字符, 转义标志) 的纯函数。

未闭合的字面量在文本结束时被丢弃，不产出 token。
插值内部不会再次识别嵌套字面量，嵌套字符串里的花括号也会被计数。
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from dql_format.core.scanner.models import LiteralToken

logger = logging.getLogger(__name__)


class Mode(Enum):
    """扫描状态"""
    OUTSIDE = "outside"
    IN_SINGLE = "in_single"
    IN_DOUBLE = "in_double"
    IN_TEMPLATE = "in_template"
    IN_INTERPOLATION = "in_interpolation"


@dataclass(frozen=True)
class ScanState:
    """
    状态机状态

    Attributes:
        mode: 当前所处的状态
        depth: 插值花括号深度，仅 IN_INTERPOLATION 使用
    """
    mode: Mode
    depth: int = 0


@dataclass(frozen=True)
class Transition:
    """
    一次状态转移的结果

    Attributes:
        state: 新状态
        escaped: 下一个字符是否被转义
        consumed: 本次消耗的字符数
        emit: 当前 token 是否在本次转移后闭合
    """
    state: ScanState
    escaped: bool = False
    consumed: int = 1
    emit: bool = False


OUTSIDE = ScanState(Mode.OUTSIDE)
TEMPLATE = ScanState(Mode.IN_TEMPLATE)

_OPENERS: dict[str, ScanState] = {
    '"': ScanState(Mode.IN_DOUBLE),
    "'": ScanState(Mode.IN_SINGLE),
    "`": TEMPLATE,
}

_CLOSING_QUOTE: dict[Mode, str] = {
    Mode.IN_DOUBLE: '"',
    Mode.IN_SINGLE: "'",
}


def step(
    state: ScanState,
    char: str,
    escaped: bool = False,
    next_char: Optional[str] = None,
) -> Transition:
    """状态转移函数（纯函数）"""
    mode = state.mode

    if mode is Mode.OUTSIDE:
        return Transition(_OPENERS.get(char, state))

    # 被转义的字符原样收下，既不是终止符也不开始新的转义
    if escaped:
        return Transition(state)
    if char == "\\":
        return Transition(state, escaped=True)

    if mode is Mode.IN_TEMPLATE:
        if char == "$" and next_char == "{":
            return Transition(ScanState(Mode.IN_INTERPOLATION, 1), consumed=2)
        if char == "`":
            return Transition(OUTSIDE, emit=True)
        return Transition(state)

    if mode is Mode.IN_INTERPOLATION:
        if char == "{":
            return Transition(ScanState(mode, state.depth + 1))
        if char == "}":
            depth = state.depth - 1
            return Transition(ScanState(mode, depth) if depth > 0 else TEMPLATE)
        return Transition(state)

    if char == _CLOSING_QUOTE[mode]:
        return Transition(OUTSIDE, emit=True)
    return Transition(state)


def iter_literals(content: str) -> Iterator[LiteralToken]:
    """按出现顺序产出所有闭合的字面量 token"""
    state = OUTSIDE
    escaped = False
    start = 0
    i = 0
    length = len(content)

    while i < length:
        next_char = content[i + 1] if i + 1 < length else None
        transition = step(state, content[i], escaped, next_char)

        if state.mode is Mode.OUTSIDE and transition.state.mode is not Mode.OUTSIDE:
            start = i

        i += transition.consumed
        if transition.emit:
            yield LiteralToken(text=content[start:i], offset=start)

        state = transition.state
        escaped = transition.escaped

    if state.mode is not Mode.OUTSIDE:
        logger.debug(
            f"Discarding unterminated literal at offset {start} "
            f"({state.mode.value}, depth={state.depth})"
        )


def extract_strings(content: str) -> list[str]:
    """提取所有字符串/模板字面量的原始文本（包含定界符）"""
    return [token.text for token in iter_literals(content)]
