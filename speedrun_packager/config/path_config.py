#!filepath: speedrun_packager/config/path_config.py
from typing import Optional

from pydantic import BaseModel


class PathConfig(BaseModel):
    """
    None → PathManager 默认位置
      app_root          = <home>/.config/Jingle
      latest_world_json = <home>/speedrunigt/latest_world.json
    """
    app_root: Optional[str] = None
    latest_world_json: Optional[str] = None
