# speedrun_packager/instance/mod_folder.py
from __future__ import annotations

import json
import zipfile
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from speedrun_packager import logs

FABRIC_MOD_JSON = "fabric.mod.json"


class ModDescriptor(BaseModel):
    """fabric.mod.json 中本项目关心的两个字段。"""
    model_config = ConfigDict(extra="ignore")

    id: str
    version: str

    @field_validator("version", mode="before")
    @classmethod
    def _coerce_version(cls, v):
        # 个别 mod 把版本写成数字
        if isinstance(v, (int, float)):
            return str(v)
        return v


class FabricModFolder:
    """
    读取 <instance>/mods/*.jar 里的 fabric.mod.json

    - mods/ 不存在 → []
    - 不是 zip / 没有 fabric.mod.json / 字段缺失 → 跳过该 jar（debug 日志）
    """

    def __init__(self, mods_dir: str | Path):
        self.mods_dir = Path(mods_dir)
        self._infos: Optional[List[ModDescriptor]] = None

    def get_infos(self) -> List[ModDescriptor]:
        if self._infos is None:
            self._infos = self._scan()
        return self._infos

    def _scan(self) -> List[ModDescriptor]:
        if not self.mods_dir.is_dir():
            logs.debug(f"[ModFolder] mods dir not found: {self.mods_dir}")
            return []

        infos = []
        for jar in sorted(self.mods_dir.glob("*.jar")):
            info = self._read_jar(jar)
            if info is not None:
                infos.append(info)

        logs.debug(f"[ModFolder] {len(infos)} fabric mod(s): {[m.id for m in infos]}")
        return infos

    @staticmethod
    def _read_jar(jar: Path) -> Optional[ModDescriptor]:
        try:
            with zipfile.ZipFile(jar) as zf:
                raw = zf.read(FABRIC_MOD_JSON)
        except KeyError:
            logs.debug(f"[ModFolder] {jar.name}: no {FABRIC_MOD_JSON}")
            return None
        except (zipfile.BadZipFile, OSError) as e:
            logs.debug(f"[ModFolder] {jar.name}: unreadable jar ({e})")
            return None

        try:
            # fabric.mod.json 常含未转义的换行
            data = json.loads(raw.decode("utf-8-sig"), strict=False)
            return ModDescriptor.model_validate(data)
        except (UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
            logs.debug(f"[ModFolder] {jar.name}: invalid {FABRIC_MOD_JSON} ({e})")
            return None
