"""
Company aggregate: the company row plus its addresses and technology links.
"""

from recruiting_api.domain import entities
from recruiting_api.domain.validation import COMPANY_RULES
from recruiting_api.notification import NotificationCollector
from recruiting_api.schemas import CompanyDTO
from recruiting_api.services.address import AddressService
from recruiting_api.services.base import CrudService, insert_children, upsert_children
from recruiting_api.services.relations import CompanyTechnologyRelService


class CompanyService(CrudService):
    entity = entities.Company
    dto = CompanyDTO
    rules = COMPANY_RULES

    def __init__(self, notifier: NotificationCollector, repository,
                 address_service: AddressService, technology_service: CompanyTechnologyRelService):
        super().__init__(notifier, repository)
        self.address_service = address_service
        self.technology_service = technology_service

    def select_by_id(self, id: int) -> CompanyDTO | None:
        company = super().select_by_id(id)
        if company is None:
            return None
        company.addresses = self.address_service.select_all_by_company(company.id)
        company.technologies = self.technology_service.select_all_by_company(company.id)
        return company

    def _insert_children(self, dto: CompanyDTO, parent_id: int) -> None:
        insert_children(dto.addresses, self.address_service, "company_id", parent_id)
        insert_children(dto.technologies, self.technology_service, "company_id", parent_id)

    def _update_children(self, dto: CompanyDTO) -> None:
        upsert_children(dto.addresses, self.address_service, "company_id", dto.id)
        upsert_children(dto.technologies, self.technology_service, "company_id", dto.id, updatable=False)

    def _delete_children(self, parent_id: int) -> None:
        self.address_service.delete_all_by_company(parent_id)
