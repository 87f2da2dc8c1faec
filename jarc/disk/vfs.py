import os
import os.path

from jarc.log import get_logger

log = get_logger(__name__)


class LocalDiskVFS:
    """
    Writes files below a root directory on the local disk.

    Paths are relative to the root and always use "/" as the separator.
    """

    def __init__(self, root: str, create: bool = True):
        if not os.path.isdir(root):
            if create:
                os.makedirs(root)
            else:
                raise ValueError(f"Root directory does not exist: {root}")

        self.root = root

    def get_full_path(self, path: str) -> str:
        return os.path.abspath(os.path.normpath(os.path.join(self.root, path)))

    def save(self, path: str, content: str):
        """
        Save content to a file, creating parent directories as needed.

        :param path: Path to the file, relative to the root.
        :param content: Content to save.
        """
        full_path = self.get_full_path(path)
        os.makedirs(os.path.dirname(full_path), exist_ok=True)
        with open(full_path, "w", encoding="utf-8") as f:
            f.write(content)
        log.debug(f"Saved file {path} ({len(content)} bytes) to {full_path}")


__all__ = ["LocalDiskVFS"]
