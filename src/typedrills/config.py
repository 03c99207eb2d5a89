import os
import sys
from pathlib import Path

from pydantic import BaseModel, Field

SNIPPETS_DIR = Path(__file__).parent / "snippets"

# Command prefixes; the snippet path is appended when the checker runs.
KNOWN_CHECKERS: dict[str, list[str]] = {
    "mypy": [sys.executable, "-m", "mypy", "--follow-imports=silent", "--no-error-summary"],
    "pyrefly": ["pyrefly", "check"],
    "zuban": ["zuban", "check"],
    "ty": ["ty", "check"],
}

DEFAULT_CHECKERS = ["mypy"]


class Settings(BaseModel):
    """Validated settings for the checker runner and the CLI."""

    checkers: dict[str, list[str]] = Field(
        default_factory=lambda: {name: list(KNOWN_CHECKERS[name]) for name in DEFAULT_CHECKERS},
        description="Checker name -> command prefix",
    )
    timeout: float = Field(120.0, gt=0, description="Timeout per checker run (seconds)")
    snippets_dir: Path = Field(SNIPPETS_DIR, description="Directory of snippets to type check")

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from TYPEDRILLS_CHECKERS and TYPEDRILLS_TIMEOUT."""
        values: dict = {}

        names = os.environ.get("TYPEDRILLS_CHECKERS")
        if names:
            selected = [n.strip() for n in names.split(",") if n.strip()]
            unknown = [n for n in selected if n not in KNOWN_CHECKERS]
            if unknown:
                raise ValueError(
                    f"Unknown checker(s): {', '.join(unknown)}. "
                    f"Choose from: {', '.join(KNOWN_CHECKERS)}"
                )
            values["checkers"] = {n: list(KNOWN_CHECKERS[n]) for n in selected}

        timeout = os.environ.get("TYPEDRILLS_TIMEOUT")
        if timeout:
            values["timeout"] = float(timeout)

        return cls(**values)
