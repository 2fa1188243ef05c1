from pathlib import Path

from send2trash import send2trash

from ..domain.interfaces import ITrashBin

class Send2TrashBin(ITrashBin):
    """
    Moves files to the OS recycle bin (Finder Trash, XDG trash, Recycle Bin).
    """

    def trash(self, path: Path) -> None:
        send2trash(str(path))
