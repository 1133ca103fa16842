"""Dashboard DTOs: pure Pydantic, no metrics or loader imports."""
from __future__ import annotations
from datetime import date, datetime
from enum import Enum
from pydantic import BaseModel


class LoadStateDTO(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class CourseRead(BaseModel):
    model_config = {"from_attributes": True}

    id: str
    title: str | None = None
    status: str | None = None
    start_date: str | None = None
    price: float | None = None


class CourseList(BaseModel):
    items: list[CourseRead]
    total: int


class StatusBucketRead(BaseModel):
    model_config = {"from_attributes": True}

    label: str
    count: int


class PaymentSummaryRead(BaseModel):
    model_config = {"from_attributes": True}

    paid_count: int
    outstanding_count: int
    rate: int | None = None


class DashboardCountsRead(BaseModel):
    model_config = {"from_attributes": True}

    instructors: int
    participants: int
    rooms: int
    courses: int
    registrations: int
    active_courses: int
    planned_courses: int


class DashboardViewRead(BaseModel):
    as_of: date
    counts: DashboardCountsRead
    status_distribution: list[StatusBucketRead]
    upcoming: list[CourseRead]
    payments: PaymentSummaryRead


class DashboardRead(BaseModel):
    state: LoadStateDTO
    view: DashboardViewRead | None = None
    error: str | None = None
    loaded_at: datetime | None = None
