"""
Export schemas.
"""

from enum import Enum

from pydantic import ConfigDict, Field

from models.base import BaseSchema


class ExportFormat(str, Enum):
    """Supported export file formats."""

    JSON = "json"
    CSV = "csv"


MEDIA_TYPES = {
    ExportFormat.JSON: "application/json",
    ExportFormat.CSV: "text/csv",
}


class ExportPayload(BaseSchema):
    """A finished export, ready to hand to a download."""

    model_config = ConfigDict(str_strip_whitespace=False)

    filename: str = Field(..., description="production_data_<date>_shift_<shift>.<ext>")
    media_type: str
    content: str = Field(..., description="UTF-8 text payload")
    row_count: int = Field(..., ge=0)

    @property
    def body(self) -> bytes:
        return self.content.encode("utf-8")
