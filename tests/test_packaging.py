# test_packaging.py
#
# Project metadata points at files that ship with the source tree.

import os
import re

ROOT = os.path.join(os.path.dirname(__file__), "..")


def test_readme_is_the_project_readme():
    with open(os.path.join(ROOT, "pyproject.toml"), encoding="utf-8") as f:
        match = re.search(r'^readme\s*=\s*"([^"]+)"', f.read(), re.MULTILINE)
    assert match is not None
    assert match.group(1) == "README.md"
    assert os.path.isfile(os.path.join(ROOT, match.group(1)))
