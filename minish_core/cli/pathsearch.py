from __future__ import annotations
import os
import shutil
from typing import Mapping, Optional

def find_executable(name: str, environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """
    Locate `name` by scanning the PATH directories of `environ`.

    Names containing a path separator are checked directly, the same way
    `shutil.which` treats them. Returns None when nothing executable is found.
    """
    if not name:
        return None
    env = os.environ if environ is None else environ
    search = env.get("PATH", os.defpath)
    return shutil.which(name, path=search)
