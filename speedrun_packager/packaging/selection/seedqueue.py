# speedrun_packager/packaging/selection/seedqueue.py
from __future__ import annotations

import os
from pathlib import Path
from typing import List

from speedrun_packager import logs
from speedrun_packager.packaging.latest_world import read_latest_world
from speedrun_packager.packaging.recency import RecencyLister
from speedrun_packager.packaging.selection.base import SelectionStrategy
from speedrun_packager.packaging.world_naming import parse_attempt_number


def _same_path(a: Path, b: Path) -> bool:
    return os.path.normcase(os.path.abspath(a)) == os.path.normcase(os.path.abspath(b))


class SeedQueueSelection(SelectionStrategy):
    """
    SeedQueue 模式：世界目录被提前异步生成，mtime 不可信。

    1. 读取 latest_world.json → 最近游玩的世界
    2. 该世界必须在当前实例的 saves/ 中（否则：选错实例）
    3. 该世界名必须符合 "... Speedrun #N"
    4. min = N - attempt_window
    5. 保留所有 attempt number >= min 的世界（保持 recency 顺序），
       不符合命名规则的世界一律排除

    任一前置条件失败 → []
    """

    name = "seedqueue"

    def __init__(self, latest_world_json: Path, attempt_window: int = 5):
        self.latest_world_json = Path(latest_world_json)
        self.attempt_window = attempt_window

    def select(self, saves_dir: Path) -> List[Path]:
        latest_world = read_latest_world(self.latest_world_json)
        if latest_world is None:
            logs.debug(f"[SeedQueueSelection] no latest world in {self.latest_world_json}")
            return []

        worlds = RecencyLister.list(saves_dir)
        if not any(_same_path(w, latest_world) for w in worlds):
            logs.debug(f"[SeedQueueSelection] {latest_world} not in {saves_dir} (wrong instance?)")
            return []

        latest_num = parse_attempt_number(latest_world.name)
        if latest_num is None:
            logs.debug(f"[SeedQueueSelection] unsupported world name: {latest_world.name}")
            return []

        minimum = latest_num - self.attempt_window
        logs.debug(f"[SeedQueueSelection] latest #{latest_num}, keeping #{minimum} and above")

        selected = []
        for w in worlds:
            num = parse_attempt_number(w.name)
            if num is not None and num >= minimum:
                selected.append(w)
        return selected
