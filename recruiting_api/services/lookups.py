from recruiting_api.domain import entities
from recruiting_api.domain.validation import GENDER_RULES, TECHNOLOGY_RULES
from recruiting_api.schemas import GenderDTO, TechnologyDTO
from recruiting_api.services.base import CrudService


class GenderService(CrudService):
    entity = entities.Gender
    dto = GenderDTO
    rules = GENDER_RULES


class TechnologyService(CrudService):
    entity = entities.Technology
    dto = TechnologyDTO
    rules = TECHNOLOGY_RULES
