from recruiting_api import models
from recruiting_api.domain import entities
from recruiting_api.repositories.base import Repository


class GenderRepository(Repository):
    model = models.Gender
    entity = entities.Gender


class TechnologyRepository(Repository):
    model = models.Technology
    entity = entities.Technology
