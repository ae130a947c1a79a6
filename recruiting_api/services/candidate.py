"""
Candidate aggregate: the candidate row plus its addresses and technology links.
"""

from recruiting_api.domain import entities
from recruiting_api.domain.validation import CANDIDATE_RULES
from recruiting_api.notification import NotificationCollector
from recruiting_api.schemas import CandidateDTO
from recruiting_api.services.address import AddressService
from recruiting_api.services.base import CrudService, insert_children, upsert_children
from recruiting_api.services.relations import CandidateTechnologyRelService


class CandidateService(CrudService):
    entity = entities.Candidate
    dto = CandidateDTO
    rules = CANDIDATE_RULES

    def __init__(self, notifier: NotificationCollector, repository,
                 address_service: AddressService, technology_service: CandidateTechnologyRelService):
        super().__init__(notifier, repository)
        self.address_service = address_service
        self.technology_service = technology_service

    def select_by_id(self, id: int) -> CandidateDTO | None:
        candidate = super().select_by_id(id)
        if candidate is None:
            return None
        candidate.addresses = self.address_service.select_all_by_candidate(candidate.id)
        candidate.technologies = self.technology_service.select_all_by_candidate(candidate.id)
        return candidate

    def _insert_children(self, dto: CandidateDTO, parent_id: int) -> None:
        insert_children(dto.addresses, self.address_service, "candidate_id", parent_id)
        insert_children(dto.technologies, self.technology_service, "candidate_id", parent_id)

    def _update_children(self, dto: CandidateDTO) -> None:
        upsert_children(dto.addresses, self.address_service, "candidate_id", dto.id)
        upsert_children(dto.technologies, self.technology_service, "candidate_id", dto.id, updatable=False)

    def _delete_children(self, parent_id: int) -> None:
        self.address_service.delete_all_by_candidate(parent_id)
