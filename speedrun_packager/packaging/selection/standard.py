# speedrun_packager/packaging/selection/standard.py
from __future__ import annotations

from pathlib import Path
from typing import List

from speedrun_packager.packaging.recency import RecencyLister
from speedrun_packager.packaging.selection.base import SelectionStrategy


class StandardSelection(SelectionStrategy):
    """
    无 SeedQueue：世界按游玩顺序创建，mtime 即尝试顺序。
    原样返回 saves/ 的 recency 列表，调用方取前 max_worlds 个。
    """

    name = "standard"

    def select(self, saves_dir: Path) -> List[Path]:
        return RecencyLister.list(saves_dir)
