"""
App Config Model
Pydantic model for the persisted config.json: the form URL and its field mapping.
"""
from pydantic import BaseModel, Field

from .field_mapping import FieldMapping


class AppConfig(BaseModel):
    form_url: str = ""
    field_mappings: FieldMapping = Field(default_factory=FieldMapping)

    def is_ready(self) -> bool:
        """True when setup can be skipped."""
        return bool(self.form_url) and self.field_mappings.is_complete()
