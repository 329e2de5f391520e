# speedrun_packager/packaging/world_selector.py
from __future__ import annotations

from pathlib import Path
from typing import Dict, List

from speedrun_packager import logs
from speedrun_packager.packaging.selection import (
    SeedQueueSelection,
    SelectionStrategy,
    SelectionStrategyFactory,
    StandardSelection,
)
from speedrun_packager.utils.path import PathManager


class WorldSelector:
    """
    select_worlds(instance, uses_companion_mode) → 世界目录列表

    模式 → 策略 的映射是静态的：
        False → StandardSelection
        True  → SeedQueueSelection
    """

    _MODE_TYPE: Dict[bool, str] = {
        False: StandardSelection.name,
        True: SeedQueueSelection.name,
    }

    def __init__(self, latest_world_json: Path | None = None, attempt_window: int = 5):
        self.latest_world_json = Path(latest_world_json or PathManager.latest_world_json())
        self.attempt_window = attempt_window

    def strategy_for(self, uses_companion_mode: bool) -> SelectionStrategy:
        typ = self._MODE_TYPE[bool(uses_companion_mode)]
        params = {
            StandardSelection.name: {},
            SeedQueueSelection.name: {
                "latest_world_json": self.latest_world_json,
                "attempt_window": self.attempt_window,
            },
        }[typ]
        return SelectionStrategyFactory.create({"type": typ, **params})

    def select_worlds(self, instance: Path | str, uses_companion_mode: bool) -> List[Path]:
        strategy = self.strategy_for(uses_companion_mode)
        worlds = strategy.select(PathManager.saves_dir(instance))
        logs.debug(f"[WorldSelector] {strategy.name}: {len(worlds)} world(s) selected")
        return worlds
