from typing import List, Tuple

from .ir import OpCode

PREFIX = "sv"
MARKER = "o"

_BY_COUNT = {op.value: op for op in OpCode}


def scan_spans(source: str) -> List[Tuple[OpCode, int]]:
    """
    Scan source text into (opcode, offset) pairs.

    A token is the prefix "sv" followed by a run of 1..8 "o" characters; the
    run length selects the opcode. Runs of any other length are skipped as a
    whole, and so is every character that does not start a prefix.
    """
    spans: List[Tuple[OpCode, int]] = []
    i = 0
    n = len(source)
    while i < n:
        if source.startswith(PREFIX, i):
            j = i + len(PREFIX)
            while j < n and source[j] == MARKER:
                j += 1
            op = _BY_COUNT.get(j - i - len(PREFIX))
            if op is not None:
                spans.append((op, i))
            i = j
        else:
            i += 1
    return spans


def scan(source: str) -> List[OpCode]:
    return [op for op, _ in scan_spans(source)]
