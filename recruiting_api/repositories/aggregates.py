"""Repositories for the aggregate roots and their owned rows."""

from recruiting_api import models
from recruiting_api.domain import entities
from recruiting_api.repositories.base import Repository


class CompanyRepository(Repository):
    model = models.Company
    entity = entities.Company


class CandidateRepository(Repository):
    model = models.Candidate
    entity = entities.Candidate
    nullable_links = ("company_id",)


class AddressRepository(Repository):
    model = models.Address
    entity = entities.Address
    # Only one owner is set; the other one goes to storage as NULL
    nullable_links = ("company_id", "candidate_id")

    def select_all_by_company(self, company_id: int) -> list[entities.Address]:
        return self._select_where(company_id=company_id)

    def select_all_by_candidate(self, candidate_id: int) -> list[entities.Address]:
        return self._select_where(candidate_id=candidate_id)

    def delete_all_by_company(self, company_id: int) -> int:
        return self._delete_where(models.Address.company_id == company_id)

    def delete_all_by_candidate(self, candidate_id: int) -> int:
        return self._delete_where(models.Address.candidate_id == candidate_id)


class JobOpeningRepository(Repository):
    model = models.JobOpening
    entity = entities.JobOpening

    def select_all_available(self) -> list[entities.JobOpening]:
        return self._select_where(available=True)


class ResponsibilityRepository(Repository):
    model = models.Responsibility
    entity = entities.Responsibility

    def select_all_by_job_opening(self, job_opening_id: int) -> list[entities.Responsibility]:
        return self._select_where(job_opening_id=job_opening_id)
