"""Repositories for join rows (technology links, interviews, weights)."""

from dataclasses import replace

from recruiting_api import models
from recruiting_api.domain import entities
from recruiting_api.repositories.base import Repository


class _TechnologyLinkRepository(Repository):
    """Link rows expose the technology name, read through the relationship."""

    def _to_entity(self, row):
        name = row.technology.name if row.technology is not None else None
        return replace(super()._to_entity(row), name=name)


class CompanyTechnologyRepository(_TechnologyLinkRepository):
    model = models.CompanyTechnology
    entity = entities.CompanyTechnologyRel

    def select_all_by_company(self, company_id: int) -> list[entities.CompanyTechnologyRel]:
        return self._select_where(company_id=company_id)


class CandidateTechnologyRepository(_TechnologyLinkRepository):
    model = models.CandidateTechnology
    entity = entities.CandidateTechnologyRel

    def select_all_by_candidate(self, candidate_id: int) -> list[entities.CandidateTechnologyRel]:
        return self._select_where(candidate_id=candidate_id)


class InterviewRepository(Repository):
    model = models.Interview
    entity = entities.Interview


class JobInterviewWeightRepository(Repository):
    model = models.JobInterviewWeight
    entity = entities.JobInterviewWeight

    def select_all_by_job_opening(self, job_opening_id: int) -> list[entities.JobInterviewWeight]:
        return self._select_where(job_opening_id=job_opening_id)
