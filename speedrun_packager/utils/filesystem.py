#!filepath: speedrun_packager/utils/filesystem.py
import json
import shutil
from pathlib import Path
from typing import Any

from speedrun_packager import logs


class FileSystem:
    """
    统一文件系统工具
    - 自动创建目录
    - 读取 JSON
    - 复制目录 / 文件到目标目录（保留原名与修改时间）
    - 获取文件大小等
    """

    @staticmethod
    def ensure_dir(path: str | Path) -> Path:
        """
        创建目录（如果不存在）
        """
        p = Path(path)
        if not p.exists():
            p.mkdir(parents=True, exist_ok=True)
            logs.debug(f"[FS] 创建目录: {p}")
        return p

    @staticmethod
    def read_json(path: str | Path) -> Any:
        """
        读取 JSON 文件。
        格式错误时抛出 json.JSONDecodeError，不做吞掉处理。
        """
        p = Path(path)
        with p.open("r", encoding="utf-8") as f:
            return json.load(f)

    @staticmethod
    def copy_dir_to_dir(src: str | Path, dest_dir: str | Path, copy_function=shutil.copy2) -> Path:
        """
        递归复制 src 目录到 dest_dir/<src.name>
        copy_function 抛出的非 OSError 异常会立即中止复制
        """
        src = Path(src)
        target = Path(dest_dir) / src.name
        shutil.copytree(src, target, copy_function=copy_function, dirs_exist_ok=True)
        logs.debug(f"[FS] 复制目录: {src} → {target}")
        return target

    @staticmethod
    def copy_file_to_dir(src: str | Path, dest_dir: str | Path) -> Path:
        src = Path(src)
        target = Path(dest_dir) / src.name
        shutil.copy2(src, target)
        logs.debug(f"[FS] 复制文件: {src} → {target}")
        return target

    @staticmethod
    def get_file_size(path: str | Path) -> int:
        """
        返回文件大小（字节）
        """
        p = Path(path)
        if not p.exists():
            return 0
        return p.stat().st_size

    @staticmethod
    def format_size(size_bytes: int) -> str:
        """
        将字节转换为可读格式（GB / MB）
        """
        for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
            if size_bytes < 1024:
                return f"{size_bytes:.2f} {unit}"
            size_bytes /= 1024
        return f"{size_bytes:.2f} PB"
