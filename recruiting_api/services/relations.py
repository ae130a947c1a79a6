"""Join-row services. Link rows are inserted and deleted, never updated."""

from recruiting_api.domain import entities
from recruiting_api.domain.validation import (
    CANDIDATE_TECHNOLOGY_RULES, COMPANY_TECHNOLOGY_RULES, INTERVIEW_RULES, JOB_INTERVIEW_WEIGHT_RULES,
)
from recruiting_api.mapping import to_dtos
from recruiting_api.schemas import (
    CandidateTechnologyRelDTO, CompanyTechnologyRelDTO, InterviewDTO, JobInterviewWeightDTO,
)
from recruiting_api.services.base import CrudService


class CompanyTechnologyRelService(CrudService):
    entity = entities.CompanyTechnologyRel
    dto = CompanyTechnologyRelDTO
    rules = COMPANY_TECHNOLOGY_RULES

    def select_all_by_company(self, company_id: int) -> list[CompanyTechnologyRelDTO]:
        return to_dtos(CompanyTechnologyRelDTO, self.repository.select_all_by_company(company_id))


class CandidateTechnologyRelService(CrudService):
    entity = entities.CandidateTechnologyRel
    dto = CandidateTechnologyRelDTO
    rules = CANDIDATE_TECHNOLOGY_RULES

    def select_all_by_candidate(self, candidate_id: int) -> list[CandidateTechnologyRelDTO]:
        return to_dtos(CandidateTechnologyRelDTO, self.repository.select_all_by_candidate(candidate_id))


class InterviewService(CrudService):
    entity = entities.Interview
    dto = InterviewDTO
    rules = INTERVIEW_RULES


class JobInterviewWeightService(CrudService):
    entity = entities.JobInterviewWeight
    dto = JobInterviewWeightDTO
    rules = JOB_INTERVIEW_WEIGHT_RULES

    def select_all_by_job_opening(self, job_opening_id: int) -> list[JobInterviewWeightDTO]:
        return to_dtos(JobInterviewWeightDTO, self.repository.select_all_by_job_opening(job_opening_id))
