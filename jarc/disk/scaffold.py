import shutil
from enum import Enum
from os.path import abspath, commonpath, isdir, join
from pathlib import Path
from typing import Optional

from jarc.config import DEFAULT_WEB_DIR
from jarc.disk.vfs import LocalDiskVFS
from jarc.log import get_logger
from jarc.templates.registry import DEFAULT_WEB_TEMPLATE, WEB_TEMPLATES

log = get_logger(__name__)


class WebAssetSource(str, Enum):
    """Where the web assets of a new project came from."""

    COPIED = "copied"
    GENERATED = "generated"


def setup_project_directory(name: str, invocation_dir: str) -> tuple[str, bool]:
    """
    Create the project directory.

    Creating a directory that already exists is not an error; the
    existing directory is reused.

    :param name: Project (directory) name.
    :param invocation_dir: Directory in which the project directory is created.
    :return: Tuple of (absolute project root, whether the directory already existed).
    """
    project_root = abspath(join(invocation_dir, name))
    existed = isdir(project_root)

    if existed:
        log.info(f"Project directory {project_root} already exists, reusing it")
    else:
        Path(project_root).mkdir(parents=True)
        log.info(f"Created project directory {project_root}")

    return project_root, existed


def find_existing_web_assets(invocation_dir: str, web_dir: str = DEFAULT_WEB_DIR) -> Optional[str]:
    """
    Look for a web asset directory next to the invocation point.

    :param invocation_dir: Directory the tool was invoked from.
    :param web_dir: Name of the web asset directory.
    :return: Absolute path to the directory, or None if there isn't one.
    """
    candidate = abspath(join(invocation_dir, web_dir))
    return candidate if isdir(candidate) else None


def copy_web_assets(source: str, project_root: str, web_dir: str = DEFAULT_WEB_DIR) -> str:
    """
    Recursively copy an existing web asset directory into the project.

    Files already present in the destination are overwritten. A directory
    can't be copied into itself; this happens when the project directory
    is the web asset directory (eg. a project named `www`).

    :param source: Web asset directory to copy.
    :param project_root: Project root directory.
    :param web_dir: Name of the web asset directory inside the project.
    :return: Absolute path of the copied web asset directory.
    :raises shutil.Error: If the destination is inside the source directory.
    """
    source = abspath(source)
    dest = abspath(join(project_root, web_dir))
    if commonpath([source, dest]) == source:
        raise shutil.Error(f"Cannot copy '{source}' into itself ('{dest}')")

    shutil.copytree(source, dest, dirs_exist_ok=True)
    log.info(f"Copied web assets from {source} to {dest}")
    return dest


def create_basic_www(project_root: str, project_name: str, web_dir: str = DEFAULT_WEB_DIR) -> str:
    """
    Generate a starter web asset tree (index.html, css/style.css, js/main.js).

    :param project_root: Project root directory.
    :param project_name: Project name, shown in the page title and heading.
    :param web_dir: Name of the web asset directory inside the project.
    :return: Summary of the created files.
    """
    file_system = LocalDiskVFS(join(project_root, web_dir))
    template = WEB_TEMPLATES[DEFAULT_WEB_TEMPLATE]()
    return template.apply(file_system, project_name)


def materialize_web_assets(
    project_name: str,
    invocation_dir: str,
    project_root: str,
    web_dir: str = DEFAULT_WEB_DIR,
) -> tuple[WebAssetSource, str]:
    """
    Put the web assets in place: copy them if they exist next to the
    invocation point, otherwise generate the starter template.

    :param project_name: Project name.
    :param invocation_dir: Directory the tool was invoked from.
    :param project_root: Project root directory.
    :param web_dir: Name of the web asset directory.
    :return: Tuple of (where the assets came from, human-readable details).
    """
    source = find_existing_web_assets(invocation_dir, web_dir)
    if source:
        copy_web_assets(source, project_root, web_dir)
        return WebAssetSource.COPIED, source

    summary = create_basic_www(project_root, project_name, web_dir)
    return WebAssetSource.GENERATED, summary


__all__ = [
    "WebAssetSource",
    "setup_project_directory",
    "find_existing_web_assets",
    "copy_web_assets",
    "create_basic_www",
    "materialize_web_assets",
]
