import os
import sys
from pathlib import Path
from dataclasses import dataclass

# Lil helper function to create missing directories on demand.
def ensure_directory(path: Path):
    path.mkdir(parents=True,exist_ok=True)
    return path

# Picks the base folder for all user-specific files. CDT_HOME always wins, so tests and portable installs can point
# it anywhere.
def _resolve_data_root() -> Path:
    override = os.getenv("CDT_HOME")
    if override:
        return Path(override)

    if sys.platform.startswith("win"):
        appdata = os.getenv("APPDATA")
        if not appdata:
            raise RuntimeError("Missing APPDATA environment variable, cannot determine data directories.")
        return Path(appdata) / "CountdownTimer"

    xdg_data = os.getenv("XDG_DATA_HOME")
    base = Path(xdg_data) if xdg_data else Path.home() / ".local" / "share"
    return base / "countdown-timer"

# Dataclass for accessing paths across program.
@dataclass(frozen=False)
class ProjectPaths:

    data: Path
    logs: Path
    settings: Path

    @staticmethod
    def build():
        data = ensure_directory(_resolve_data_root())
        logs = ensure_directory(data / "logs")

        return ProjectPaths(
            data = data,
            logs = logs,
            settings = data / "settings.json",
        )
PATHS = ProjectPaths.build()
