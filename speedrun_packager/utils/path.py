#!filepath: speedrun_packager/utils/path.py
from pathlib import Path
from typing import Optional

from speedrun_packager import logs


class PathManager:
    """
    目录结构：

    <home>
     ├── .config/Jingle/              ← app root
     │     ├── logs/
     │     └── submissionpackages/
     │           └── Submission (2026-10-19 20-15-03)/
     └── speedrunigt/
           └── latest_world.json      ← SpeedRunIGT 写入的最新世界指针

    <instance>
     ├── saves/
     ├── logs/
     └── mods/
    """

    _root: Optional[Path] = None
    _latest_world_json: Optional[Path] = None

    # ---------------------------------------------------------
    # root detection
    # ---------------------------------------------------------
    @classmethod
    def detect_root(cls) -> Path:
        return Path.home() / ".config" / "Jingle"

    @classmethod
    def root(cls) -> Path:
        if cls._root is None:
            cls._root = cls.detect_root()
        return cls._root

    @classmethod
    def set_root(cls, new_root: Path | str | None):
        if new_root is None:
            cls._root = None
        else:
            cls._root = Path(new_root).expanduser().resolve()
        logs.debug(f"[PathManager] set_root = {cls._root}")

    @classmethod
    def set_latest_world_json(cls, path: Path | str | None):
        cls._latest_world_json = Path(path).expanduser() if path else None
        logs.debug(f"[PathManager] set_latest_world_json = {cls._latest_world_json}")

    @classmethod
    def configure(cls, paths) -> None:
        """
        paths: PathConfig（空值 → 使用默认位置）
        """
        cls.set_root(paths.app_root or None)
        cls.set_latest_world_json(paths.latest_world_json or None)

    @classmethod
    def reset(cls) -> None:
        cls._root = None
        cls._latest_world_json = None

    # ---------------------------------------------------------
    # app root
    # ---------------------------------------------------------
    @classmethod
    def log_dir(cls) -> Path:
        return cls.root() / "logs"

    @classmethod
    def submission_packages_dir(cls) -> Path:
        return cls.root() / "submissionpackages"

    @classmethod
    def latest_world_json(cls) -> Path:
        if cls._latest_world_json is not None:
            return cls._latest_world_json
        return Path.home() / "speedrunigt" / "latest_world.json"

    # ---------------------------------------------------------
    # instance/
    # ---------------------------------------------------------
    @classmethod
    def saves_dir(cls, instance: Path | str) -> Path:
        return Path(instance) / "saves"

    @classmethod
    def instance_logs_dir(cls, instance: Path | str) -> Path:
        return Path(instance) / "logs"

    @classmethod
    def mods_dir(cls, instance: Path | str) -> Path:
        return Path(instance) / "mods"
