import re
from importlib.metadata import PackageNotFoundError, version
from os.path import abspath, basename, dirname, isdir, isfile, join
from typing import Optional

GIT_DIR_PATH = abspath(join(dirname(__file__), "..", "..", ".git"))
SETUP_PY_PATH = abspath(join(dirname(__file__), "..", "..", "setup.py"))


def get_git_commit() -> Optional[str]:
    """
    Return the current git commit (if running from a repo).

    :return: commit hash or None if not running from a git repo
    """

    if not isdir(GIT_DIR_PATH):
        return None

    git_head = join(GIT_DIR_PATH, "HEAD")
    if not isfile(git_head):
        return None

    with open(git_head, "r", encoding="utf-8") as f:
        ref = f.read().strip()

    # Direct reference to commit hash
    if not ref.startswith("ref: "):
        return ref

    ref = ref[5:]
    ref_path = join(GIT_DIR_PATH, ref)

    # Dangling reference, return the reference name
    if not isfile(ref_path):
        return basename(ref_path)

    with open(ref_path, "r", encoding="utf-8") as f:
        return f.read().strip()


def get_package_version() -> str:
    """
    Get package version as defined in setup.py.

    Falls back to the installed distribution metadata, and to "0.0.0"
    if neither is available.

    :return: package version
    """
    UNKNOWN = "0.0.0"
    SETUP_VERSION_PATTERN = re.compile(r'^\s*VERSION\s*=\s*"(.*)"\s*(#.*)?$')

    if isfile(SETUP_PY_PATH):
        with open(SETUP_PY_PATH, "r", encoding="utf-8") as fp:
            for line in fp:
                m = SETUP_VERSION_PATTERN.match(line)
                if m:
                    return m.group(1)

    try:
        return version("jarc")
    except PackageNotFoundError:
        return UNKNOWN


def get_version() -> str:
    """
    Find and return the current version of JARC.

    The version string is built from the package version and the current
    git commit hash (if running from a git repo).

    Example: 1.0.0-gitbf01c19

    :return: version string
    """

    pkg_version = get_package_version()
    commit = get_git_commit()
    if commit:
        pkg_version = pkg_version + "-git" + commit[:7]

    return pkg_version


__all__ = ["get_version"]
