"""
Pydantic schemas for the Compares API.
"""
from typing import Optional, Any
from pydantic import BaseModel, Field


# ============================================================
# COMPARISON SCHEMAS
# ============================================================

class ComparisonRequest(BaseModel):
    x: str = Field(..., description="Baseline document text")
    y: str = Field(..., description="Document compared against the baseline")
    encoding: str = "json"


class ComparisonResponse(BaseModel):
    encoding: str
    equal: bool
    change_count: int
    new_keys: list[str] = []
    deleted_keys: list[str] = []
    changed_keys: list[Any] = []


class FileComparisonResponse(ComparisonResponse):
    x_file: str
    y_file: str
    report: str


class IsEqualRequest(BaseModel):
    x: Optional[str] = None
    y: Optional[str] = None


class IsEqualResponse(BaseModel):
    equal: bool


class AreEqualRequest(BaseModel):
    items: list[Optional[str]] = []


class AreEqualResponse(BaseModel):
    equal: bool
    first_divergence_index: int


# ============================================================
# ERROR SCHEMAS
# ============================================================

class ErrorResponse(BaseModel):
    detail: str
    error: str
