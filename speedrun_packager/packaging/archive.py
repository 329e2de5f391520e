# speedrun_packager/packaging/archive.py
from __future__ import annotations

import shutil
import zipfile
from pathlib import Path
from typing import Iterator, Tuple

from speedrun_packager import logs

CHUNK_SIZE = 1 << 20  # 1MB


class ArchiveBuilder:
    """
    目录 → zip

    - entry 名 = 相对 source 的路径（统一为 "/" 分隔）
    - 不写目录 entry，目录结构由文件路径隐式保留
    - 单个文件读取失败 → 跳过，继续遍历
    - 打开 / 关闭 zip 失败 → 记录错误，返回 False（不影响调用方）
    """

    @staticmethod
    def iter_files(source: Path) -> Iterator[Tuple[str, Path]]:
        """
        (arcname, file) 的惰性序列，按路径排序保证输出稳定。
        """
        for p in sorted(source.rglob("*")):
            if p.is_file():
                yield p.relative_to(source).as_posix(), p

    @staticmethod
    def _write_entry(zf: zipfile.ZipFile, arcname: str, file: Path) -> None:
        zinfo = zipfile.ZipInfo.from_file(file, arcname, strict_timestamps=False)
        zinfo.compress_type = zipfile.ZIP_DEFLATED

        with file.open("rb") as src:
            with zf.open(zinfo, "w") as dst:
                shutil.copyfileobj(src, dst, CHUNK_SIZE)

    @classmethod
    def build(cls, zip_path: str | Path, source: str | Path) -> bool:
        zip_path = Path(zip_path)
        source = Path(source)

        written = 0
        skipped = 0
        try:
            with zipfile.ZipFile(zip_path, "w", zipfile.ZIP_DEFLATED) as zf:
                for arcname, file in cls.iter_files(source):
                    try:
                        cls._write_entry(zf, arcname, file)
                    except OSError as e:
                        skipped += 1
                        logs.debug(f"[Archive] skip unreadable file {file}: {e}")
                        continue
                    written += 1
        except OSError as e:
            logs.error(f"Error while copying folder to zip: {zip_path}\n{e!r}")
            return False

        logs.info(f"[Archive] {zip_path.name}: {written} file(s), {skipped} skipped")
        return True
