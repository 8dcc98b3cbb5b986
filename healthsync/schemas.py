## healthsync/schemas.py

from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Optional


class VitalsRecord(BaseModel):
    """Vitals found in one report. Unmatched fields stay None and are left
    out of ``to_dict()``."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    systolic: Optional[int] = None
    diastolic: Optional[int] = None
    blood_pressure: Optional[str] = Field(default=None, alias="bloodPressure")
    blood_sugar: Optional[int] = Field(default=None, alias="bloodSugar")
    heart_rate: Optional[int] = Field(default=None, alias="heartRate")
    temperature: Optional[float] = None
    weight: Optional[int] = None
    cholesterol: Optional[int] = None
    hba1c: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)

    def __len__(self) -> int:
        return len(self.to_dict())

    def __bool__(self) -> bool:
        return len(self) > 0


class Report(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    user_id: str = Field(alias="userId")
    file_name: str = Field(alias="fileName")
    file_type: str = Field(alias="fileType")
    file_path: str = Field(alias="filePath")
    report_type: str = Field(default="General", alias="reportType")
    uploaded_at: str = Field(alias="uploadedAt", description="ISO-8601 UTC")
    ocr_text: str = Field(alias="ocrText")
    vitals: Dict[str, Any] = Field(default_factory=dict)


class StoredVitals(BaseModel):
    """Flattened vitals row kept for trend analysis."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    report_id: str = Field(alias="reportId")
    user_id: str = Field(alias="userId")
    date: str

    @classmethod
    def from_record(cls, report_id: str, user_id: str, date: str, vitals: VitalsRecord) -> "StoredVitals":
        return cls(reportId=report_id, userId=user_id, date=date, **vitals.to_dict())
