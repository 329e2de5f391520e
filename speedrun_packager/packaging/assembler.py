#!filepath: speedrun_packager/packaging/assembler.py
from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional

from speedrun_packager import logs
from speedrun_packager.config.app_config import AppConfig
from speedrun_packager.instance.mod_folder import FabricModFolder
from speedrun_packager.packaging.archive import ArchiveBuilder
from speedrun_packager.packaging.companion import detect_companion_mode
from speedrun_packager.packaging.notifier import ConsoleNotifier, Notifier
from speedrun_packager.packaging.recency import RecencyLister
from speedrun_packager.packaging.world_selector import WorldSelector
from speedrun_packager.utils.errors import CompanionRequirementError, WorldLockedError
from speedrun_packager.utils.filesystem import FileSystem
from speedrun_packager.utils.path import PathManager

REFER_TO_RULES = "Please refer to the speedrun.com rules to submit files yourself."
WORLD_OPEN_TITLE = "Package Files Error"
WORLD_OPEN_MESSAGE = (
    "Cannot package files - a world appears to be open! "
    "Please press Options > Stop Resets & Quit in your instance."
)


@dataclass(frozen=True)
class SubmissionPlan:
    """
    打包前确定的内容（只读）：
      - worlds 已按模式截断（SeedQueue 模式不截断）
      - logs   已截断为 max_logs 个文件
    """
    instance: Path
    companion_mode: bool
    worlds: List[Path] = field(default_factory=list)
    logs: List[Path] = field(default_factory=list)


class SubmissionAssembler:
    """
    SubmissionAssembler = 编排器

    prepare_submission(instance) →
        <app root>/submissionpackages/Submission (<ts>)/
            Worlds/  Logs/  Worlds.zip  Logs.zip

    前置条件不满足 → 记录 ERROR，返回 None（不创建任何目录）
    世界被占用     → 阻塞提示 + ERROR，返回 None
    其他 I/O / JSON 错误 → 向上抛出
    """

    def __init__(
            self,
            cfg: AppConfig | None = None,
            notifier: Notifier | None = None,
            mod_folder_cls: Callable[[Path], FabricModFolder] = FabricModFolder,
            now: Callable[[], datetime] = datetime.now,
    ):
        self.cfg = cfg or AppConfig.default()
        self.notifier = notifier or ConsoleNotifier()
        self.mod_folder_cls = mod_folder_cls
        self.now = now

        PathManager.configure(self.cfg.paths)
        self.selector = WorldSelector(
            latest_world_json=PathManager.latest_world_json(),
            attempt_window=self.cfg.packaging.attempt_window,
        )

    # --------------------------------------------------
    # plan（只读）
    # --------------------------------------------------
    def plan(self, instance_path: str | Path) -> Optional[SubmissionPlan]:
        instance = Path(instance_path)
        pcfg = self.cfg.packaging

        saves_dir = PathManager.saves_dir(instance)
        if not saves_dir.is_dir():
            logs.error(f"Saves path for instance not found! {REFER_TO_RULES}")
            return None

        logs_dir = PathManager.instance_logs_dir(instance)
        if not logs_dir.is_dir():
            logs.error(f"Logs path for instance not found! {REFER_TO_RULES}")
            return None

        mods = self.mod_folder_cls(PathManager.mods_dir(instance)).get_infos()
        try:
            companion_mode = detect_companion_mode(mods, pcfg)
        except CompanionRequirementError as e:
            logs.debug(f"[Assembler] {e}")
            logs.error(f"SeedQueue detected without an updated SpeedRunIGT! {REFER_TO_RULES}")
            return None

        # latest world + 5 previous saves, or previous 5 attempts + everything after for SeedQueue
        worlds = [w for w in self.selector.select_worlds(instance, companion_mode) if w.is_dir()]
        if not worlds:
            logs.error(f"No worlds found! {REFER_TO_RULES}")
            if companion_mode:
                logs.error(
                    "(You are using SeedQueue, so this may be because you selected the wrong "
                    "instance to package, or your SpeedRunIGT might be out of date!)"
                )
            return None

        if not companion_mode:
            worlds = worlds[:pcfg.max_worlds]

        recent_logs = [p for p in RecencyLister.list(logs_dir) if p.is_file()][:pcfg.max_logs]

        return SubmissionPlan(
            instance=instance,
            companion_mode=companion_mode,
            worlds=worlds,
            logs=recent_logs,
        )

    # --------------------------------------------------
    # naming
    # --------------------------------------------------
    def submission_folder_name(self) -> str:
        stamp = self.now().strftime("%Y/%m/%d %H:%M:%S")
        return f"Submission ({stamp})".replace(":", "-").replace("/", "-")

    # --------------------------------------------------
    # copy
    # --------------------------------------------------
    @staticmethod
    def _copy_worlds(worlds: List[Path], dest: Path) -> None:
        for world in worlds:
            logs.info(f"Copying {world.name} to submission folder...")

            # 文件被占用（session.lock 等）→ 立即中止；其余错误由 copytree 汇总为 shutil.Error 向上抛出
            def _copy_file(src, dst, world=world):
                try:
                    return shutil.copy2(src, dst)
                except PermissionError as e:
                    raise WorldLockedError(world, e) from e

            try:
                FileSystem.copy_dir_to_dir(world, dest, copy_function=_copy_file)
            except PermissionError as e:
                raise WorldLockedError(world, e) from e

    @staticmethod
    def _copy_logs(log_files: List[Path], dest: Path) -> None:
        for log_file in log_files:
            logs.info(f"Copying {log_file.name} to submission folder...")
            FileSystem.copy_file_to_dir(log_file, dest)

    # --------------------------------------------------
    # entry
    # --------------------------------------------------
    @logs.catch(msg="prepare_submission failed")
    def prepare_submission(self, instance_path: str | Path) -> Optional[Path]:
        plan = self.plan(instance_path)
        if plan is None:
            return None

        submission_path = PathManager.submission_packages_dir() / self.submission_folder_name()
        FileSystem.ensure_dir(submission_path)
        logs.info("Created folder for submission.")

        worlds_dest = FileSystem.ensure_dir(submission_path / "Worlds")
        try:
            self._copy_worlds(plan.worlds, worlds_dest)
        except WorldLockedError as e:
            logs.debug(f"[Assembler] {e}")
            self.notifier.error(WORLD_OPEN_TITLE, WORLD_OPEN_MESSAGE)
            logs.error(WORLD_OPEN_MESSAGE)
            return None

        logs_dest = FileSystem.ensure_dir(submission_path / "Logs")
        self._copy_logs(plan.logs, logs_dest)

        ArchiveBuilder.build(submission_path / "Worlds.zip", worlds_dest)
        ArchiveBuilder.build(submission_path / "Logs.zip", logs_dest)

        logs.info(
            f"Saved submission files for instance to {submission_path} "
            f"(Worlds.zip {FileSystem.format_size(FileSystem.get_file_size(submission_path / 'Worlds.zip'))}).\n"
            f"Please submit a download link to your files through this form: "
            f"{self.cfg.packaging.submission_form_url}"
        )
        return submission_path
