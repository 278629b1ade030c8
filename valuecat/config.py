"""Environment-driven settings for valuecat.

VALUECAT_CATALOG        path of the JSON catalog snapshot (default ./catalog.json)
VALUECAT_DEFAULT_IMAGE  image URL given to items saved without one
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

DEFAULT_IMAGE = "https://placehold.co/400x400/png"


def catalog_path(override: Optional[Path] = None) -> Path:
    """Resolve the snapshot path: explicit override, then env, then ./catalog.json."""
    if override is not None:
        return override
    return Path(os.environ.get("VALUECAT_CATALOG", "catalog.json"))


def default_image() -> str:
    """Image URL used when an item is saved with a blank image_url."""
    return os.environ.get("VALUECAT_DEFAULT_IMAGE") or DEFAULT_IMAGE
