from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import List

from .exceptions import UnsupportedPlatformError


def opener_command(path: Path, platform: str | None = None) -> List[str]:
    """Command that opens ``path`` with the viewer registered for its type."""
    platform = platform or sys.platform
    if platform.startswith("win"):
        return ["rundll32", "url.dll,FileProtocolHandler", str(path)]
    if platform == "darwin":
        return ["open", str(path)]
    if platform.startswith("linux"):
        return ["xdg-open", str(path)]
    raise UnsupportedPlatformError(f"Unsupported platform: {platform}")


def open_file(path: Path, platform: str | None = None) -> None:
    subprocess.Popen(opener_command(path, platform))
