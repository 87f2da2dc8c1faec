#!/usr/bin/env python


import os.path
import sys

try:
    from jarc.cli.main import run_jarc
except ImportError as err:
    jarc_root = os.path.dirname(__file__)
    requirements_path = os.path.join(jarc_root, "requirements.txt")
    print(
        f"Python environment for JARC is not completely set up: module `{err.name}` is missing",
        file=sys.stderr,
    )
    print(
        f"Please run `{sys.executable} -m pip install -r {requirements_path}` to finish Python setup, and rerun JARC.",
        file=sys.stderr,
    )
    sys.exit(255)

sys.exit(run_jarc())
