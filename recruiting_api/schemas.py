"""
Pydantic schemas for request/response validation.

These define the shape of data going in and out of our API endpoints.
FastAPI uses these to auto-validate requests and generate API docs.
Ids default to 0, meaning "not stored yet".
"""

from datetime import date
from typing import Any, Optional

from pydantic import BaseModel


# ─── Lookups ─────────────────────────────────────────────────────────

class GenderDTO(BaseModel):
    id: int = 0
    name: Optional[str] = None

    class Config:
        from_attributes = True      # allows creating from domain entities


class TechnologyDTO(BaseModel):
    id: int = 0
    name: Optional[str] = None

    class Config:
        from_attributes = True


# ─── Relations ───────────────────────────────────────────────────────

class CompanyTechnologyRelDTO(BaseModel):
    id: int = 0
    company_id: int = 0
    technology_id: int = 0
    name: Optional[str] = None      # technology name, read-only

    class Config:
        from_attributes = True


class CandidateTechnologyRelDTO(BaseModel):
    id: int = 0
    candidate_id: int = 0
    technology_id: int = 0
    name: Optional[str] = None

    class Config:
        from_attributes = True


class InterviewDTO(BaseModel):
    id: int = 0
    candidate_id: int = 0
    job_opening_id: int = 0

    class Config:
        from_attributes = True


class JobInterviewWeightDTO(BaseModel):
    id: int = 0
    technology_id: int = 0
    job_opening_id: int = 0
    weight: int = 0

    class Config:
        from_attributes = True


# ─── Aggregates ──────────────────────────────────────────────────────

class AddressDTO(BaseModel):
    id: int = 0
    company_id: int = 0
    candidate_id: int = 0
    name: Optional[str] = None
    zip_code: Optional[str] = None      # "01001-000"
    street: Optional[str] = None
    number: Optional[str] = None
    complement: Optional[str] = None
    neighborhood: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None         # two-letter UF, e.g. "SP"

    class Config:
        from_attributes = True


class CompanyDTO(BaseModel):
    id: int = 0
    name: Optional[str] = None
    cnpj: Optional[str] = None
    open_date: Optional[date] = None
    email: Optional[str] = None
    addresses: list[AddressDTO] = []
    technologies: list[CompanyTechnologyRelDTO] = []

    class Config:
        from_attributes = True


class CandidateDTO(BaseModel):
    id: int = 0
    company_id: int = 0
    gender_id: int = 0
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    cpf: Optional[str] = None
    rg: Optional[str] = None
    date_of_birth: Optional[date] = None
    addresses: list[AddressDTO] = []
    technologies: list[CandidateTechnologyRelDTO] = []

    class Config:
        from_attributes = True


class ResponsibilityDTO(BaseModel):
    id: int = 0
    job_opening_id: int = 0
    description: Optional[str] = None

    class Config:
        from_attributes = True


class JobOpeningDTO(BaseModel):
    id: int = 0
    title: Optional[str] = None
    summary: Optional[str] = None
    description: Optional[str] = None
    available: bool = True
    responsibilities: list[ResponsibilityDTO] = []

    class Config:
        from_attributes = True


# ─── Report ──────────────────────────────────────────────────────────

class ReportCandidateDTO(BaseModel):
    """A candidate scored against one available job opening."""
    candidate_id: int
    full_name: str
    job_title: str
    total_score: int

    class Config:
        from_attributes = True


# ─── Envelopes ───────────────────────────────────────────────────────

class SuccessEnvelope(BaseModel):
    success: bool = True
    data: Any = None


class ErrorEnvelope(BaseModel):
    success: bool = False
    errors: list[str]
    title: Optional[str] = None
    status: int
    method: Optional[str] = None
    type: Optional[str] = None
