from recruiting_api.domain import entities, messages
from recruiting_api.domain.validation import ADDRESS_RULES
from recruiting_api.mapping import to_dtos
from recruiting_api.schemas import AddressDTO
from recruiting_api.services.base import CrudService
from recruiting_api.services.result import ServiceResult


class AddressService(CrudService):
    entity = entities.Address
    dto = AddressDTO
    rules = ADDRESS_RULES

    def select_all_by_company(self, company_id: int) -> list[AddressDTO]:
        return to_dtos(AddressDTO, self.repository.select_all_by_company(company_id))

    def select_all_by_candidate(self, candidate_id: int) -> list[AddressDTO]:
        return to_dtos(AddressDTO, self.repository.select_all_by_candidate(candidate_id))

    def delete_all_by_company(self, company_id: int) -> ServiceResult:
        return self._delete_all(self.repository.delete_all_by_company, company_id)

    def delete_all_by_candidate(self, candidate_id: int) -> ServiceResult:
        return self._delete_all(self.repository.delete_all_by_candidate, candidate_id)

    def _delete_all(self, delete_all, owner_id: int) -> ServiceResult:
        try:
            if not delete_all(owner_id):
                return self._persistence_failed(messages.DELETE_FAILED)
            return ServiceResult.ok(1)
        except Exception as exc:
            return self._unexpected(exc)
