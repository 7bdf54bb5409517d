"""Store configuration from environment variables."""

from enum import Enum

from pydantic_settings import BaseSettings, SettingsConfigDict


class SaveLayout(str, Enum):
    """Shape of the data written by Settings.save()."""

    NESTED = "nested"  # one child section per key, holding a field of the same name
    FLAT = "flat"  # key: value directly under the root section


class StoreConfig(BaseSettings):
    """Settings store behaviour loaded from environment."""

    # Persistence
    save_layout: SaveLayout = SaveLayout.NESTED
    load_nested_sections: bool = True  # Unwrap per-key sections written by nested saves

    model_config = SettingsConfigDict(
        env_prefix="SKILL_SETTINGS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


store_config = StoreConfig()
