#!filepath: speedrun_packager/utils/logger.py
import os
import sys
import json
from functools import wraps
from time import perf_counter
from typing import Callable, Optional

from loguru import logger


class Logging:
    """
    日志门面（loguru）
    ---------------------------------------
    - 按日期切割 / 保留周期
    - warning / error 同时输出到控制台（GUI / CLI 直接可见）
    - 函数级日志装饰器 catch()
    ---------------------------------------
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "INFO",
    ):
        self.configure(log_dir, rotation, retention, log_level)

    def configure(
        self,
        log_dir: Optional[str],
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "INFO",
    ) -> None:
        """
        (重新) 配置全局 logger，替换已有的 sink
        log_dir=None → 只输出到 stderr，不创建任何文件（import 时的默认状态）
        """
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level

        logger.remove()

        if self.log_dir is None:
            # warning / error 已经 print，stderr 只接收更低级别
            logger.add(
                sink=sys.stderr,
                level=self.level,
                format="{time:HH:mm:ss} | {level} | {message}",
                filter=lambda record: record["level"].no < logger.level("WARNING").no,
            )
            return

        os.makedirs(self.log_dir, exist_ok=True)
        logger.add(
            sink=f"{self.log_dir}/{{time:YYYY-MM-DD}}.log",
            rotation=self.rotation,
            retention=self.retention,
            level=self.level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
            enqueue=True,
            backtrace=True,
            diagnose=True,
        )

        logger.debug(f"[Logging] sink -> {self.log_dir} level={self.level}")

    # ----------- 日志方法 -----------
    def debug(self, msg: str, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        print(msg)
        logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        print(msg)
        logger.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.exception(msg, *args, **kwargs)

    # ---------- 日志装饰器 ----------
    def catch(
        self,
        msg: str = "Exception occurred",
        log_inputs: bool = False,
        log_time: bool = True,
    ) -> Callable:

        def decorator(func: Callable):
            @wraps(func)
            def wrapper(*args, **kwargs):

                if log_inputs:
                    logger.debug(
                        f"[CALL] {func.__name__} args={args}, "
                        f"kwargs={json.dumps(kwargs, ensure_ascii=False, default=str)}"
                    )

                start = perf_counter()

                try:
                    result = func(*args, **kwargs)
                except Exception:
                    logger.exception(f"[ERROR] {func.__name__}: {msg}")
                    raise

                if log_time:
                    cost = perf_counter() - start
                    logger.debug(f"[TIME] {func.__name__} took {cost:.4f}s")

                return result

            return wrapper

        return decorator


def init_logging(log_dir: str, level: str = "INFO", rotation: Optional[str] = None,
                 retention: Optional[str] = None) -> Logging:
    """CLI 启动时根据 LogConfig 重新指向日志目录。"""
    logs.configure(
        log_dir,
        rotation=rotation or logs.rotation,
        retention=retention or logs.retention,
        log_level=level,
    )
    return logs


# 默认全局 logs：仅 stderr，由 init_logging 指向日志目录
logs = Logging()
