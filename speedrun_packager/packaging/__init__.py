"""
World Selection Doctrine

A submission must contain the run's world plus the five attempts before it.
Which directories those are depends on how worlds get created.

------------------------------------------------------------
Standard: worlds are created when played
------------------------------------------------------------
- mtime order == attempt order
- most recent world + 5 previous saves (max 6)

------------------------------------------------------------
SeedQueue: worlds are pre-generated in the background
------------------------------------------------------------
- mtime order is meaningless
- the attempt number in "... Speedrun #N" is authoritative
- SpeedRunIGT's latest_world.json names the run's world
- every world with number >= N - 5 is copied (no cap)

The two modes never mix: a SeedQueue instance whose SpeedRunIGT is too
old is rejected instead of falling back to the standard rule.
"""

from .archive import ArchiveBuilder
from .assembler import SubmissionAssembler, SubmissionPlan
from .recency import RecencyLister
from .world_naming import parse_attempt_number
from .world_selector import WorldSelector

__all__ = [
    "ArchiveBuilder",
    "RecencyLister",
    "SubmissionAssembler",
    "SubmissionPlan",
    "WorldSelector",
    "parse_attempt_number",
]
