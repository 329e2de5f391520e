# speedrun_packager/config/packaging_config.py
from pydantic import BaseModel, Field


class PackagingConfig(BaseModel):
    # 标准模式：最新世界 + 之前 5 个
    max_worlds: int = Field(default=6, ge=1)
    max_logs: int = Field(default=6, ge=1)

    # SeedQueue 模式：latest attempt number - attempt_window 起的所有世界
    attempt_window: int = Field(default=5, ge=0)

    companion_mod_id: str = "seedqueue"
    igt_mod_id: str = "speedrunigt"
    min_igt_version: str = "14.0"

    submission_form_url: str = "https://forms.gle/v7oPXfjfi7553jkp7"
