# speedrun_packager/packaging/recency.py
from __future__ import annotations

from pathlib import Path
from typing import List

from speedrun_packager.utils.errors import DirectoryNotFoundError


class RecencyLister:
    """
    列出目录的直接子项（文件 / 目录均可），按修改时间降序（最新在前）。

    - 非目录 → DirectoryNotFoundError
    - 空目录 → []
    - 无副作用
    """

    @staticmethod
    def _mtime(p: Path) -> int:
        try:
            return p.stat().st_mtime_ns
        except FileNotFoundError:
            # 悬空链接 / 列举后被删除
            return 0

    @classmethod
    def list(cls, path: str | Path) -> List[Path]:
        p = Path(path)
        if not p.is_dir():
            raise DirectoryNotFoundError(f"Not a directory: {p}")

        return sorted(p.iterdir(), key=cls._mtime, reverse=True)
