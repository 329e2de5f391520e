# speedrun_packager/utils/errors.py


class DirectoryNotFoundError(FileNotFoundError):
    """
    Raised when a path expected to be a directory is missing or is a file.
    """


class CompanionRequirementError(RuntimeError):
    """
    SeedQueue is installed but SpeedRunIGT is missing or too old.
    The submission must abort; never fall back to the standard selection.
    """


class WorldLockedError(RuntimeError):
    """
    A world directory could not be copied because another process holds it
    (the game still has the world open).
    """

    def __init__(self, world, cause: BaseException):
        super().__init__(f"world is in use: {world} ({cause})")
        self.world = world
        self.cause = cause
