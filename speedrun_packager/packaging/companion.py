# speedrun_packager/packaging/companion.py
from __future__ import annotations

from typing import Iterable

from speedrun_packager import logs
from speedrun_packager.config.packaging_config import PackagingConfig
from speedrun_packager.instance.mod_folder import ModDescriptor
from speedrun_packager.utils.errors import CompanionRequirementError
from speedrun_packager.utils.version import VersionUtil

# VersionUtil.try_compare 解析失败时的返回值（视为版本过旧）
VERSION_PARSE_FAILED = -2


def detect_companion_mode(mods: Iterable[ModDescriptor], cfg: PackagingConfig) -> bool:
    """
    SeedQueue 存在 → True
      且必须同时存在 SpeedRunIGT >= min_igt_version（忽略 "+build" 后缀），
      否则抛 CompanionRequirementError（不回退到标准模式）
    SeedQueue 不存在 → False
    """
    mods = list(mods)

    if not any(m.id == cfg.companion_mod_id for m in mods):
        return False

    igt_ok = any(
        m.id == cfg.igt_mod_id
        and VersionUtil.try_compare(
            VersionUtil.strip_build(m.version), cfg.min_igt_version, VERSION_PARSE_FAILED
        ) >= 0
        for m in mods
    )
    if not igt_ok:
        raise CompanionRequirementError(
            f"{cfg.companion_mod_id} requires {cfg.igt_mod_id} >= {cfg.min_igt_version}"
        )

    logs.debug("SeedQueue detected, using SeedQueue world yoinking method.")
    return True
