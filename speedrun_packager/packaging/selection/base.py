# speedrun_packager/packaging/selection/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List


class SelectionStrategy(ABC):
    """
    SelectionStrategy

    纯选择器：
      saves/ -> 需要打包的世界目录（有序）

    返回 [] 表示 "没有找到世界"，由调用方记录错误并中止。
    截断（最多 N 个）不在这里做。
    """

    name: str = ""

    @abstractmethod
    def select(self, saves_dir: Path) -> List[Path]:
        ...
