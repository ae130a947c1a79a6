from dataclasses import replace
from datetime import date, datetime

import pytest

from recruiting_api import models
from recruiting_api.domain import entities
from recruiting_api.repositories.aggregates import (
    AddressRepository, CandidateRepository, CompanyRepository, JobOpeningRepository, ResponsibilityRepository,
)
from recruiting_api.repositories.lookups import GenderRepository, TechnologyRepository
from recruiting_api.repositories.relations import (
    CandidateTechnologyRepository, InterviewRepository, JobInterviewWeightRepository,
)


def test_insert_and_select(db):
    repo = GenderRepository(db)

    new_id = repo.insert(entities.Gender(name="Female"))

    assert new_id > 0
    assert repo.select_by_id(new_id) == entities.Gender(id=new_id, name="Female")
    assert [g.name for g in repo.select_all()] == ["Female"]


def test_select_missing_returns_none(db):
    assert GenderRepository(db).select_by_id(123) is None
    assert GenderRepository(db).select_all() == []


def test_failed_insert_returns_zero(db):
    repo = GenderRepository(db)

    # NOT NULL violation
    assert repo.insert(entities.Gender(name=None)) == 0
    # the session is usable again afterwards
    assert repo.insert(entities.Gender(name="Male")) > 0


def test_update_returns_id_or_zero(db):
    repo = GenderRepository(db)
    new_id = repo.insert(entities.Gender(name="Female"))

    assert repo.update(entities.Gender(id=new_id, name="Woman")) == new_id
    assert repo.select_by_id(new_id).name == "Woman"
    assert repo.update(entities.Gender(id=999, name="Nobody")) == 0


def test_update_keeps_created_at(db):
    repo = GenderRepository(db)
    new_id = repo.insert(entities.Gender(name="Female"))
    created_at = db.get(models.Gender, new_id).created_at

    repo.update(entities.Gender(id=new_id, name="Woman"))
    db.expire_all()

    assert db.get(models.Gender, new_id).created_at == created_at


def test_delete_missing_row_still_returns_one(db):
    assert GenderRepository(db).delete(999) == 1


def test_unset_company_is_stored_as_null(db):
    gender_id = GenderRepository(db).insert(entities.Gender(name="Female"))
    repo = CandidateRepository(db)

    candidate_id = repo.insert(entities.Candidate(
        gender_id=gender_id, first_name="Maria", last_name="Silva",
        cpf="529.982.247-25", date_of_birth=date(1990, 5, 10),
    ))

    assert db.get(models.Candidate, candidate_id).company_id is None
    assert repo.select_by_id(candidate_id).company_id == 0


def test_addresses_by_owner(db):
    repo = AddressRepository(db)
    values = dict(name="Headquarters", zip_code="01001-000", street="Praca da Se",
                  number="100", neighborhood="Se", city="Sao Paulo", state="SP")
    repo.insert(entities.Address(company_id=1, **values))
    repo.insert(entities.Address(company_id=1, **values))
    repo.insert(entities.Address(candidate_id=2, **values))

    assert len(repo.select_all_by_company(1)) == 2
    assert len(repo.select_all_by_candidate(2)) == 1

    assert repo.delete_all_by_company(1) == 1
    assert repo.select_all_by_company(1) == []
    assert len(repo.select_all_by_candidate(2)) == 1


def test_technology_link_carries_technology_name(db):
    technology_id = TechnologyRepository(db).insert(entities.Technology(name="Python"))
    repo = CandidateTechnologyRepository(db)
    repo.insert(entities.CandidateTechnologyRel(candidate_id=1, technology_id=technology_id))

    [link] = repo.select_all_by_candidate(1)

    assert link.technology_id == technology_id
    assert link.name == "Python"


@pytest.mark.parametrize("repository_cls, entity", [
    (TechnologyRepository, entities.Technology(name="Python")),
    (CompanyRepository, entities.Company(
        name="Acme Tecnologia", cnpj="11.222.333/0001-81", open_date=date(2015, 3, 1), email="contact@acme.example",
    )),
    (CandidateRepository, entities.Candidate(
        company_id=0, gender_id=1, first_name="Maria", last_name="Silva", cpf="529.982.247-25",
        rg="12.345.678-9", date_of_birth=date(1990, 5, 10),
    )),
    (AddressRepository, entities.Address(
        candidate_id=3, name="Home address", zip_code="01001-000", street="Praca da Se", number="100",
        complement="Apto 12", neighborhood="Se", city="Sao Paulo", state="SP",
    )),
    (JobOpeningRepository, entities.JobOpening(
        title="Backend Developer", summary="Build and maintain the hiring APIs", available=False,
    )),
    (ResponsibilityRepository, entities.Responsibility(job_opening_id=2, description="Design endpoints")),
    (InterviewRepository, entities.Interview(candidate_id=1, job_opening_id=2)),
    (JobInterviewWeightRepository, entities.JobInterviewWeight(technology_id=1, job_opening_id=2, weight=7)),
])
def test_inserted_row_reads_back_equal(db, repository_cls, entity):
    repo = repository_cls(db)

    new_id = repo.insert(entity)

    assert new_id > 0
    assert repo.select_by_id(new_id) == replace(entity, id=new_id)


def test_update_writes_modified_at(db):
    repo = GenderRepository(db)
    new_id = repo.insert(entities.Gender(name="Female", modified_at=datetime(2020, 1, 1)))
    later = datetime(2030, 6, 15, 12, 30)

    repo.update(entities.Gender(id=new_id, name="Woman", modified_at=later))
    db.expire_all()

    assert db.get(models.Gender, new_id).modified_at == later
