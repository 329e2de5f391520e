#!filepath: speedrun_packager/utils/version.py
from __future__ import annotations

from itertools import zip_longest
from typing import List


class VersionUtil:
    """
    点分数字版本比较：
        "14.0"   == "14"
        "14.0"   <  "14.0.1"
        "13.9.2" <  "14.0"

    构建元数据（"+" 之后的部分，例如 "14.2+1.20.1"）需由调用方先 strip_build()。
    """

    @staticmethod
    def strip_build(version: str) -> str:
        return version.split("+", 1)[0]

    @staticmethod
    def _parts(version: str) -> List[int]:
        s = version.strip()
        if not s:
            raise ValueError("empty version string")
        try:
            return [int(p) for p in s.split(".")]
        except ValueError:
            raise ValueError(f"无法解析版本号: {version!r}") from None

    @classmethod
    def compare(cls, a: str, b: str) -> int:
        """
        返回 -1 / 0 / 1，缺失的段按 0 处理。
        非数字段抛出 ValueError。
        """
        for x, y in zip_longest(cls._parts(a), cls._parts(b), fillvalue=0):
            if x != y:
                return -1 if x < y else 1
        return 0

    @classmethod
    def try_compare(cls, a: str, b: str, on_failure: int) -> int:
        try:
            return cls.compare(a, b)
        except ValueError:
            return on_failure
