"""Environment-driven defaults for the report CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DANGER_ID_ENV_VAR = "DANGER_ID"
DANGER_COMMIT_REF_ENV_VAR = "DANGER_COMMIT_REF"
DEFAULT_DANGER_ID = "default"


@dataclass(frozen=True, slots=True)
class RenderSettings:
    """Identifiers embedded into rendered comments."""

    danger_id: str = DEFAULT_DANGER_ID
    commit_ref: str | None = None


def get_render_settings() -> RenderSettings:
    """Read render settings from the environment and a local `.env` file."""
    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)

    danger_id = os.getenv(DANGER_ID_ENV_VAR) or DEFAULT_DANGER_ID
    commit_ref = os.getenv(DANGER_COMMIT_REF_ENV_VAR) or None
    return RenderSettings(danger_id=danger_id, commit_ref=commit_ref)
