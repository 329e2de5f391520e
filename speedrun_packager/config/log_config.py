#!filepath: speedrun_packager/config/log_config.py
from pydantic import BaseModel

class LogConfig(BaseModel):
    # 空字符串 → <app root>/logs
    dir: str = ""
    rotation: str = "1 day"
    retention: str = "30 days"
    level: str = "INFO"
