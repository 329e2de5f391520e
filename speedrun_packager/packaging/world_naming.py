# speedrun_packager/packaging/world_naming.py
"""
Atum 世界命名约定：``<prefix>Speedrun #<N>``

N 是单调递增的 attempt number。SeedQueue 会提前异步生成世界目录，
此时 mtime 不能代表尝试顺序，只有 N 可以。
"""
from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

ATTEMPT_WORLD_PATTERN = re.compile(r".*Speedrun #(\d+)", re.ASCII)


def parse_attempt_number(name: str | Path) -> Optional[int]:
    """
    "Random Speedrun #1234" → 1234
    "New World"             → None

    Path 取最后一级目录名。不匹配时返回 None，不抛异常。
    """
    if isinstance(name, Path):
        name = name.name

    m = ATTEMPT_WORLD_PATTERN.fullmatch(name)
    if m is None:
        return None
    return int(m.group(1))
