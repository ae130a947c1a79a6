"""
Rule sets, one per entity.

Services call `validate(RULES, entity)` before touching a repository.
"""

from recruiting_api.domain import documents, messages
from recruiting_api.domain.rules import (
    Rule, exact_length, length, linked, must, not_empty, not_null, required_text,
)

GENDER_RULES = (
    not_empty("name"),
    length("name", 1, 20),
)

TECHNOLOGY_RULES = (
    not_empty("name"),
    length("name", 1, 30),
)

COMPANY_RULES = (
    not_empty("name"),
    length("name", 1, 50),
    not_empty("cnpj"),
    not_null("cnpj"),
    must("cnpj", documents.is_valid_cnpj, messages.DOCUMENT_INVALID.format("cnpj")),
)

CANDIDATE_RULES = (
    linked("gender_id", "Candidate"),
    *required_text("first_name", 5, 100),
    *required_text("last_name", 5, 100),
    not_empty("cpf"),
    not_null("cpf"),
    must("cpf", documents.is_valid_cpf, messages.DOCUMENT_INVALID.format("cpf")),
    must("date_of_birth", documents.is_adult, messages.UNDER_AGE.format("date_of_birth", "Candidate")),
)


def _single_owner(address) -> bool:
    return bool(address.company_id) != bool(address.candidate_id)


ADDRESS_RULES = (
    *required_text("name", 5, 50),
    not_empty("zip_code"),
    not_null("zip_code"),
    exact_length("zip_code", 9),
    *required_text("street", 5, 100),
    *required_text("number", 1, 5),
    *required_text("neighborhood", 1, 100),
    *required_text("city", 1, 100),
    not_empty("state"),
    not_null("state"),
    exact_length("state", 2),
    must("state", documents.is_valid_state, messages.STATE_INVALID.format("state")),
    Rule(_single_owner, messages.ADDRESS_OWNER),
)

JOB_OPENING_RULES = (
    not_empty("title"),
    length("title", 1, 30),
    not_empty("summary"),
    length("summary", 10, 100),
)

RESPONSIBILITY_RULES = tuple(required_text("description", 1, 150))

COMPANY_TECHNOLOGY_RULES = (
    linked("company_id", "CompanyTechnologyRel"),
    linked("technology_id", "CompanyTechnologyRel"),
)

CANDIDATE_TECHNOLOGY_RULES = (
    linked("candidate_id", "CandidateTechnologyRel"),
    linked("technology_id", "CandidateTechnologyRel"),
)

INTERVIEW_RULES = (
    linked("candidate_id", "Interview"),
    linked("job_opening_id", "Interview"),
)

JOB_INTERVIEW_WEIGHT_RULES = (
    linked("technology_id", "JobInterviewWeight"),
    linked("job_opening_id", "JobInterviewWeight"),
)
