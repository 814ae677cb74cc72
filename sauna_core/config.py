import logging
import os
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .catalog import PARTS, PartKind

logger = logging.getLogger(__name__)

STORAGE_KEY = "sauna_builder_parts_v1"


class Settings(BaseModel):
    """
    Generator geometry and editor defaults.
    Module size defaults to the catalog wall width so walls tile the grid exactly.
    """
    model_config = ConfigDict(extra="forbid")

    module_size: float = Field(default=PARTS[PartKind.WALL].width, gt=0)
    grid_step: float = Field(default=1.0, gt=0)
    storage_key: str = STORAGE_KEY
    storage_path: Optional[str] = None
    random_min_modules: int = Field(default=2, ge=1)
    random_max_modules: int = Field(default=4, ge=1)

    @model_validator(mode="after")
    def _random_range(self) -> "Settings":
        if self.random_min_modules > self.random_max_modules:
            raise ValueError(
                f"random_min_modules ({self.random_min_modules}) exceeds "
                f"random_max_modules ({self.random_max_modules})"
            )
        return self


def load_settings(file_path: Optional[str] = None) -> Settings:
    if not file_path:
        return Settings()
    if not os.path.exists(file_path):
        logger.info("Settings file %s not found, using defaults", file_path)
        return Settings()

    with open(file_path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    return Settings(**(data or {}))
