"""
Domain entities.

Plain immutable records: built once from a DTO (or a database row),
validated, handed to a repository. `id` is 0 until storage assigns one.
Timestamps are excluded from equality so a freshly built entity compares
equal to the one read back from storage.
"""

from dataclasses import dataclass, field
from datetime import date, datetime


def _now() -> datetime:
    return datetime.utcnow()


@dataclass(frozen=True, kw_only=True)
class Gender:
    id: int = 0
    name: str | None
    created_at: datetime = field(default_factory=_now, compare=False)
    modified_at: datetime = field(default_factory=_now, compare=False)


@dataclass(frozen=True, kw_only=True)
class Technology:
    id: int = 0
    name: str | None
    created_at: datetime = field(default_factory=_now, compare=False)
    modified_at: datetime = field(default_factory=_now, compare=False)


@dataclass(frozen=True, kw_only=True)
class Company:
    id: int = 0
    name: str | None
    cnpj: str | None
    open_date: date | None = None
    email: str | None = None
    created_at: datetime = field(default_factory=_now, compare=False)
    modified_at: datetime = field(default_factory=_now, compare=False)


@dataclass(frozen=True, kw_only=True)
class Candidate:
    id: int = 0
    company_id: int = 0         # optional link, 0 means "no company"
    gender_id: int = 0
    first_name: str | None
    last_name: str | None
    cpf: str | None
    rg: str | None = None
    date_of_birth: date | None
    created_at: datetime = field(default_factory=_now, compare=False)
    modified_at: datetime = field(default_factory=_now, compare=False)


@dataclass(frozen=True, kw_only=True)
class Address:
    id: int = 0
    company_id: int = 0
    candidate_id: int = 0
    name: str | None
    zip_code: str | None
    street: str | None
    number: str | None
    complement: str | None = None
    neighborhood: str | None
    city: str | None
    state: str | None
    created_at: datetime = field(default_factory=_now, compare=False)
    modified_at: datetime = field(default_factory=_now, compare=False)


@dataclass(frozen=True, kw_only=True)
class CompanyTechnologyRel:
    id: int = 0
    company_id: int = 0
    technology_id: int = 0
    name: str | None = None     # technology name, filled on reads only
    created_at: datetime = field(default_factory=_now, compare=False)
    modified_at: datetime = field(default_factory=_now, compare=False)


@dataclass(frozen=True, kw_only=True)
class CandidateTechnologyRel:
    id: int = 0
    candidate_id: int = 0
    technology_id: int = 0
    name: str | None = None
    created_at: datetime = field(default_factory=_now, compare=False)
    modified_at: datetime = field(default_factory=_now, compare=False)


@dataclass(frozen=True, kw_only=True)
class JobOpening:
    id: int = 0
    title: str | None
    summary: str | None
    description: str | None = None
    available: bool = True
    created_at: datetime = field(default_factory=_now, compare=False)
    modified_at: datetime = field(default_factory=_now, compare=False)


@dataclass(frozen=True, kw_only=True)
class Responsibility:
    id: int = 0
    job_opening_id: int = 0
    description: str | None
    created_at: datetime = field(default_factory=_now, compare=False)
    modified_at: datetime = field(default_factory=_now, compare=False)


@dataclass(frozen=True, kw_only=True)
class Interview:
    id: int = 0
    candidate_id: int = 0
    job_opening_id: int = 0
    created_at: datetime = field(default_factory=_now, compare=False)
    modified_at: datetime = field(default_factory=_now, compare=False)


@dataclass(frozen=True, kw_only=True)
class JobInterviewWeight:
    id: int = 0
    technology_id: int = 0
    job_opening_id: int = 0
    weight: int = 0
    created_at: datetime = field(default_factory=_now, compare=False)
    modified_at: datetime = field(default_factory=_now, compare=False)


@dataclass(frozen=True)
class ReportCandidate:
    """One row of the candidate scoring report. Derived, never stored."""
    candidate_id: int
    full_name: str
    job_title: str
    total_score: int
