"""
Job openings and their responsibilities.

Deleting an opening re-reads its responsibilities and deletes them one
by one through ResponsibilityService.
"""

from recruiting_api.domain import entities
from recruiting_api.domain.validation import JOB_OPENING_RULES, RESPONSIBILITY_RULES
from recruiting_api.mapping import to_dtos
from recruiting_api.notification import NotificationCollector
from recruiting_api.schemas import JobOpeningDTO, ResponsibilityDTO
from recruiting_api.services.base import CrudService, insert_children, upsert_children


class ResponsibilityService(CrudService):
    entity = entities.Responsibility
    dto = ResponsibilityDTO
    rules = RESPONSIBILITY_RULES

    def select_all_by_job_opening(self, job_opening_id: int) -> list[ResponsibilityDTO]:
        return to_dtos(ResponsibilityDTO, self.repository.select_all_by_job_opening(job_opening_id))


class JobOpeningService(CrudService):
    entity = entities.JobOpening
    dto = JobOpeningDTO
    rules = JOB_OPENING_RULES

    def __init__(self, notifier: NotificationCollector, repository,
                 responsibility_service: ResponsibilityService):
        super().__init__(notifier, repository)
        self.responsibility_service = responsibility_service

    def select_all_available(self) -> list[JobOpeningDTO]:
        return to_dtos(JobOpeningDTO, self.repository.select_all_available())

    def select_by_id(self, id: int) -> JobOpeningDTO | None:
        job_opening = super().select_by_id(id)
        if job_opening is None:
            return None
        job_opening.responsibilities = self.responsibility_service.select_all_by_job_opening(id)
        return job_opening

    def _insert_children(self, dto: JobOpeningDTO, parent_id: int) -> None:
        insert_children(dto.responsibilities, self.responsibility_service, "job_opening_id", parent_id)

    def _update_children(self, dto: JobOpeningDTO) -> None:
        upsert_children(dto.responsibilities, self.responsibility_service, "job_opening_id", dto.id)

    def _delete_children(self, parent_id: int) -> None:
        for responsibility in self.responsibility_service.select_all_by_job_opening(parent_id):
            self.responsibility_service.delete(responsibility.id)
