# speedrun_packager/packaging/latest_world.py
from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from speedrun_packager import logs
from speedrun_packager.utils.filesystem import FileSystem


class LatestWorldPointer(BaseModel):
    """
    SpeedRunIGT 写入的 latest_world.json（只读）：

        {"world_path": "C:\\MultiMC\\instances\\1\\.minecraft\\saves\\Random Speedrun #42", ...}
    """
    model_config = ConfigDict(extra="ignore")

    world_path: Optional[str] = None


def read_latest_world(json_path: str | Path) -> Optional[Path]:
    """
    返回指针指向的世界目录；文件不存在或无法读取（权限 / 非 UTF-8）/ world_path 缺失或不是字符串 → None。
    JSON 格式错误（json.JSONDecodeError）向上抛出。
    """
    json_path = Path(json_path)
    if not json_path.is_file():
        logs.debug(f"[LatestWorld] pointer not found: {json_path}")
        return None

    try:
        raw = FileSystem.read_json(json_path)
    except (PermissionError, UnicodeDecodeError) as e:
        logs.debug(f"[LatestWorld] pointer unreadable: {json_path} ({e})")
        return None

    if not isinstance(raw, dict):
        logs.debug(f"[LatestWorld] unexpected document type: {type(raw).__name__}")
        return None

    try:
        pointer = LatestWorldPointer.model_validate(raw)
    except ValidationError as e:
        logs.debug(f"[LatestWorld] invalid pointer document: {e}")
        return None

    if not pointer.world_path:
        return None

    return Path(pointer.world_path)
