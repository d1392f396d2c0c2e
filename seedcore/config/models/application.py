"""Application identity and local storage configuration."""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, model_validator


class ApplicationConfig(BaseModel):
    """Identity of the running application and its local storage root.

    Storage is enabled only when `storage` is set.
    """

    name: str = Field(default="seedcore", min_length=1, description="Application name")
    id: str = Field(
        default="seedcore",
        min_length=1,
        description="Unique application identifier, defaults to the name",
    )
    version: str = Field(default="0.0.0", description="Application version")
    storage: Path | None = Field(
        default=None,
        description="Root of the local storage area, None disables storage",
    )

    @model_validator(mode="before")
    @classmethod
    def normalize_identity_and_storage(cls, data: Any) -> Any:
        """Default the id to the name and treat a blank storage path as disabled."""
        if not isinstance(data, dict):
            return data

        data = dict(data)
        if not data.get("id") and data.get("name"):
            data["id"] = data["name"]

        storage = data.get("storage")
        if isinstance(storage, str):
            data["storage"] = Path(storage).expanduser() if storage.strip() else None
        elif isinstance(storage, Path):
            data["storage"] = storage.expanduser()

        return data

    @property
    def is_storage_enabled(self) -> bool:
        return self.storage is not None
