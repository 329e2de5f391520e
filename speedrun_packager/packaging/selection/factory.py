# speedrun_packager/packaging/selection/factory.py
from __future__ import annotations

from typing import Dict, Type

from speedrun_packager.packaging.selection.base import SelectionStrategy
from speedrun_packager.packaging.selection.seedqueue import SeedQueueSelection
from speedrun_packager.packaging.selection.standard import StandardSelection


class SelectionStrategyFactory:
    """
    注册式 SelectionStrategy 构造器

    All strategies are registered statically in _REGISTRY.
    Adding a strategy requires a deliberate code change here.
    """

    _REGISTRY: Dict[str, Type[SelectionStrategy]] = {
        StandardSelection.name: StandardSelection,
        SeedQueueSelection.name: SeedQueueSelection,
    }

    # --------------------------------------------------
    @classmethod
    def create(cls, cfg: Dict) -> SelectionStrategy:
        """
        cfg:
          {"type": "seedqueue", "latest_world_json": ..., "attempt_window": 5}

        规则：
          - cfg["type"] 必须存在
          - 未注册 type -> ValueError
        """
        if "type" not in cfg:
            raise KeyError("[SelectionStrategyFactory] missing 'type' in strategy config")

        typ = cfg["type"]

        if typ not in cls._REGISTRY:
            raise ValueError(
                f"[SelectionStrategyFactory] unknown selection type: {typ}"
            )

        strategy_cls = cls._REGISTRY[typ]

        # type 字段不传给 Strategy 本体
        params = {k: v for k, v in cfg.items() if k != "type"}

        return strategy_cls(**params)
