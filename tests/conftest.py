# tests/conftest.py
from __future__ import annotations

import json
import os
import time
import zipfile
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import pytest
from loguru import logger

from speedrun_packager.config.app_config import AppConfig
from speedrun_packager.config.path_config import PathConfig
from speedrun_packager.packaging.notifier import Notifier
from speedrun_packager.utils.path import PathManager


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


@pytest.fixture(autouse=True)
def _reset_path_manager():
    yield
    PathManager.reset()


@pytest.fixture
def log_messages() -> List[Tuple[str, str]]:
    """
    捕获 (level, message)，用于断言日志级别与内容。
    """
    records: List[Tuple[str, str]] = []

    def _sink(msg):
        records.append((msg.record["level"].name, msg.record["message"]))

    handler_id = logger.add(_sink, level="DEBUG")
    yield records
    logger.remove(handler_id)


# ============================================================
# filesystem helpers
# ============================================================
def set_mtime(p: Path, ts: float) -> None:
    os.utime(p, (ts, ts))


def write_jar(mods_dir: Path, mod_id: str, version: str, name: Optional[str] = None) -> Path:
    mods_dir.mkdir(parents=True, exist_ok=True)
    jar = mods_dir / (name or f"{mod_id}-{version}.jar")
    with zipfile.ZipFile(jar, "w") as zf:
        zf.writestr(
            "fabric.mod.json",
            json.dumps({"schemaVersion": 1, "id": mod_id, "version": version}),
        )
        zf.writestr(f"{mod_id}/Mod.class", b"\xca\xfe\xba\xbe")
    return jar


class RecordingNotifier(Notifier):
    def __init__(self):
        self.calls: List[Tuple[str, str]] = []

    def error(self, title: str, message: str) -> None:
        self.calls.append((title, message))


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def latest_world_json(tmp_path: Path) -> Path:
    return tmp_path / "home" / "speedrunigt" / "latest_world.json"


@pytest.fixture
def write_latest_world(latest_world_json: Path):
    def _write(world_path: Optional[Path | str], **extra) -> Path:
        latest_world_json.parent.mkdir(parents=True, exist_ok=True)
        doc = {"world_path": str(world_path) if world_path is not None else None, **extra}
        latest_world_json.write_text(json.dumps(doc), encoding="utf-8")
        return latest_world_json

    return _write


@pytest.fixture
def app_cfg(tmp_path: Path, latest_world_json: Path) -> AppConfig:
    return AppConfig(
        paths=PathConfig(
            app_root=str(tmp_path / "app"),
            latest_world_json=str(latest_world_json),
        )
    )


@pytest.fixture
def make_instance(tmp_path: Path):
    """
    Factory fixture：

        instance = make_instance(
            worlds=["Speedrun #10", "Speedrun #9"],   # 第一个最新
            log_files=["latest.log", "2026-10-18-1.log.gz"],
            mods=[("seedqueue", "1.2"), ("speedrunigt", "14.2+1.16.1")],
        )

    <tmp>/instance/
        saves/<world>/level.dat, region/r.0.0.mca
        logs/<log>
        mods/<id>-<version>.jar
    """

    def _make(
            worlds: Sequence[str] = (),
            log_files: Sequence[str] = ("latest.log",),
            mods: Iterable[Tuple[str, str]] = (),
            name: str = "instance",
            with_saves: bool = True,
            with_logs: bool = True,
    ) -> Path:
        instance = tmp_path / name
        instance.mkdir(parents=True, exist_ok=True)
        base = time.time() - 100_000

        if with_saves:
            saves = instance / "saves"
            saves.mkdir()
            for i, world in enumerate(worlds):
                w = saves / world
                (w / "region").mkdir(parents=True)
                (w / "level.dat").write_bytes(f"level:{world}".encode("utf-8"))
                (w / "region" / "r.0.0.mca").write_bytes(os.urandom(256))
                set_mtime(w, base - i * 60)

        if with_logs:
            logs_dir = instance / "logs"
            logs_dir.mkdir()
            for i, log_name in enumerate(log_files):
                f = logs_dir / log_name
                f.write_text(f"log {log_name}\n", encoding="utf-8")
                set_mtime(f, base - i * 60)

        for mod_id, version in mods:
            write_jar(instance / "mods", mod_id, version)

        return instance

    return _make


def zip_contents(zip_path: Path) -> Dict[str, bytes]:
    with zipfile.ZipFile(zip_path) as zf:
        return {n: zf.read(n) for n in zf.namelist()}


@pytest.fixture
def write_mod_jar():
    return write_jar


@pytest.fixture
def touch():
    """touch(path, ts) → 设置 mtime"""
    return set_mtime


@pytest.fixture
def read_zip():
    return zip_contents
