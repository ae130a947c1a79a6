import logging
from unittest.mock import MagicMock, call

import pytest

from recruiting_api.domain import entities, messages
from recruiting_api.schemas import (
    AddressDTO, CandidateDTO, CandidateTechnologyRelDTO, CompanyDTO, CompanyTechnologyRelDTO, GenderDTO, InterviewDTO,
    JobInterviewWeightDTO, JobOpeningDTO, ResponsibilityDTO,
)
from recruiting_api.services.address import AddressService
from recruiting_api.services.base import CrudService
from recruiting_api.services.candidate import CandidateService
from recruiting_api.services.company import CompanyService
from recruiting_api.services.job_opening import JobOpeningService
from recruiting_api.services.lookups import GenderService
from recruiting_api.services.relations import (
    CandidateTechnologyRelService, CompanyTechnologyRelService, InterviewService, JobInterviewWeightService,
)
from recruiting_api.services.result import ResultKind, ServiceResult

from payloads import VALID_CNPJ, VALID_CPF, address_payload


@pytest.fixture
def repository():
    return MagicMock()


@pytest.fixture
def gender_service(notifier, repository):
    return GenderService(notifier, repository)


def make_company_service(notifier, repository):
    return CompanyService(notifier, repository, MagicMock(), MagicMock())


# ─── Insert ──────────────────────────────────────────────────────────

def test_insert_returns_new_id_and_writes_it_back(gender_service, repository, notifier):
    repository.insert.return_value = 7
    dto = GenderDTO(name="Female")

    result = gender_service.insert(dto)

    assert result.kind is ResultKind.OK
    assert result.value == 7
    assert dto.id == 7
    assert not notifier.is_notification()
    stored = repository.insert.call_args.args[0]
    assert isinstance(stored, entities.Gender)
    assert stored.name == "Female"


def test_invalid_insert_never_reaches_repository(gender_service, repository, notifier):
    result = gender_service.insert(GenderDTO(name=""))

    assert result.kind is ResultKind.VALIDATION_FAILED
    assert not result
    assert result.value == 0
    repository.insert.assert_not_called()
    assert notifier.get_notification() == list(result.messages)


def test_relation_with_unset_foreign_key_is_rejected(notifier, repository):
    service = InterviewService(notifier, repository)

    result = service.insert(InterviewDTO(candidate_id=3, job_opening_id=0))

    assert result.kind is ResultKind.VALIDATION_FAILED
    assert result.messages == (messages.FIELD_NOT_LINKED.format("job_opening_id", "Interview"),)
    repository.insert.assert_not_called()


@pytest.mark.parametrize("service_cls, dto, field, owner", [
    (CompanyTechnologyRelService, CompanyTechnologyRelDTO(company_id=0, technology_id=2),
     "company_id", "CompanyTechnologyRel"),
    (CompanyTechnologyRelService, CompanyTechnologyRelDTO(company_id=1, technology_id=0),
     "technology_id", "CompanyTechnologyRel"),
    (CandidateTechnologyRelService, CandidateTechnologyRelDTO(candidate_id=0, technology_id=2),
     "candidate_id", "CandidateTechnologyRel"),
    (CandidateTechnologyRelService, CandidateTechnologyRelDTO(candidate_id=1, technology_id=0),
     "technology_id", "CandidateTechnologyRel"),
    (JobInterviewWeightService, JobInterviewWeightDTO(technology_id=0, job_opening_id=3, weight=5),
     "technology_id", "JobInterviewWeight"),
    (JobInterviewWeightService, JobInterviewWeightDTO(technology_id=2, job_opening_id=0, weight=5),
     "job_opening_id", "JobInterviewWeight"),
])
def test_every_relation_rejects_unset_links(notifier, repository, service_cls, dto, field, owner):
    result = service_cls(notifier, repository).insert(dto)

    assert result.kind is ResultKind.VALIDATION_FAILED
    assert result.messages == (messages.FIELD_NOT_LINKED.format(field, owner),)
    repository.insert.assert_not_called()


def test_invalid_update_never_reaches_repository(gender_service, repository, notifier):
    result = gender_service.update(GenderDTO(id=4, name=""))

    assert result.kind is ResultKind.VALIDATION_FAILED
    repository.update.assert_not_called()


def test_repository_zero_is_a_persistence_failure(gender_service, repository, notifier):
    repository.insert.return_value = 0

    result = gender_service.insert(GenderDTO(name="Female"))

    assert result.kind is ResultKind.PERSISTENCE_FAILED
    assert result.cause is None
    assert notifier.get_notification() == [messages.SAVE_FAILED]


def test_exception_collapses_into_a_result(gender_service, repository, notifier):
    repository.insert.side_effect = RuntimeError("boom")

    result = gender_service.insert(GenderDTO(name="Female"))

    assert result.kind is ResultKind.PERSISTENCE_FAILED
    assert isinstance(result.cause, RuntimeError)
    assert result.value == 0
    assert notifier.get_notification() == [messages.UNEXPECTED_ERROR.format("boom")]


def test_company_insert_links_children_to_new_parent(notifier, repository):
    repository.insert.return_value = 42
    service = make_company_service(notifier, repository)
    dto = CompanyDTO(
        name="Acme Tecnologia",
        cnpj=VALID_CNPJ,
        addresses=[AddressDTO(**address_payload()), AddressDTO(**address_payload(name="Branch office"))],
        technologies=[CompanyTechnologyRelDTO(technology_id=5)],
    )

    result = service.insert(dto)

    assert result.value == 42
    inserted = [c.args[0] for c in service.address_service.insert.call_args_list]
    assert [a.company_id for a in inserted] == [42, 42]
    link = service.technology_service.insert.call_args.args[0]
    assert link.company_id == 42


def test_invalid_company_touches_no_children(notifier, repository):
    service = make_company_service(notifier, repository)

    service.insert(CompanyDTO(name="Acme", cnpj="not a cnpj", addresses=[AddressDTO(**address_payload())]))

    repository.insert.assert_not_called()
    service.address_service.insert.assert_not_called()


# ─── Update ──────────────────────────────────────────────────────────

def test_update_splits_children_on_id(notifier, repository):
    repository.update.return_value = 5
    service = make_company_service(notifier, repository)
    dto = CompanyDTO(
        id=5,
        name="Acme Tecnologia",
        cnpj=VALID_CNPJ,
        addresses=[
            AddressDTO(**address_payload()),
            AddressDTO(id=9, company_id=5, **address_payload(name="Branch office")),
        ],
        technologies=[CompanyTechnologyRelDTO(technology_id=1), CompanyTechnologyRelDTO(id=3, technology_id=2)],
    )

    result = service.update(dto)

    assert result.value == 5
    assert service.address_service.insert.call_count == 1
    assert service.address_service.insert.call_args.args[0].company_id == 5
    assert service.address_service.update.call_count == 1
    assert service.address_service.update.call_args.args[0].id == 9
    # links are never updated
    assert service.technology_service.insert.call_count == 1
    service.technology_service.update.assert_not_called()


def test_candidate_update_splits_addresses_on_id(notifier, repository):
    repository.update.return_value = 6
    service = CandidateService(notifier, repository, MagicMock(), MagicMock())
    dto = CandidateDTO(
        id=6,
        gender_id=1,
        first_name="Maria",
        last_name="Silva",
        cpf=VALID_CPF,
        date_of_birth="1990-05-10",
        addresses=[
            AddressDTO(**address_payload(name="Home address")),
            AddressDTO(id=11, candidate_id=6, **address_payload(name="Old address")),
        ],
    )

    result = service.update(dto)

    assert result.value == 6
    assert service.address_service.insert.call_count == 1
    assert service.address_service.insert.call_args.args[0].candidate_id == 6
    assert service.address_service.update.call_count == 1
    assert service.address_service.update.call_args.args[0].id == 11


def test_update_moves_children_onto_the_updated_parent(notifier, repository):
    repository.update.return_value = 5
    service = make_company_service(notifier, repository)
    dto = CompanyDTO(
        id=5,
        name="Acme Tecnologia",
        cnpj=VALID_CNPJ,
        addresses=[AddressDTO(company_id=77, **address_payload())],
    )

    service.update(dto)

    assert service.address_service.insert.call_args.args[0].company_id == 5


def test_update_logs_each_child_outcome(notifier, repository, caplog):
    repository.update.return_value = 5
    service = make_company_service(notifier, repository)
    service.address_service.insert.return_value = ServiceResult.ok(20)
    service.address_service.update.return_value = ServiceResult.ok(9)
    dto = CompanyDTO(
        id=5,
        name="Acme Tecnologia",
        cnpj=VALID_CNPJ,
        addresses=[AddressDTO(**address_payload()), AddressDTO(id=9, **address_payload(name="Branch office"))],
    )

    with caplog.at_level(logging.DEBUG, logger="recruiting_api.services.base"):
        service.update(dto)

    logged = [r.getMessage() for r in caplog.records]
    assert "insert of child AddressDTO of #5: ok" in logged
    assert "update of child AddressDTO of #5: ok" in logged


def test_update_of_missing_row_fails(gender_service, repository, notifier):
    repository.update.return_value = 0

    result = gender_service.update(GenderDTO(id=99, name="Female"))

    assert result.kind is ResultKind.PERSISTENCE_FAILED
    assert notifier.get_notification() == [messages.UPDATE_FAILED]


# ─── Delete ──────────────────────────────────────────────────────────

def test_delete_missing_row_is_not_found(gender_service, repository, notifier):
    repository.select_by_id.return_value = None

    result = gender_service.delete(3)

    assert result.kind is ResultKind.NOT_FOUND
    repository.delete.assert_not_called()
    assert notifier.get_notification() == [messages.RECORD_NOT_FOUND]


def test_delete_then_delete_again(gender_service, repository):
    repository.select_by_id.side_effect = [entities.Gender(id=3, name="Female"), None]
    repository.delete.return_value = 1

    assert gender_service.delete(3).value == 1
    assert gender_service.delete(3).kind is ResultKind.NOT_FOUND
    repository.delete.assert_called_once_with(3)


def test_company_delete_removes_addresses_after_parent(notifier, repository):
    repository.select_by_id.return_value = entities.Company(id=4, name="Acme", cnpj=VALID_CNPJ)
    repository.delete.return_value = 1
    service = make_company_service(notifier, repository)

    assert service.delete(4)

    service.address_service.delete_all_by_company.assert_called_once_with(4)


def test_job_opening_delete_cascades_each_responsibility(notifier, repository):
    repository.select_by_id.return_value = entities.JobOpening(id=8, title="Backend", summary="Build the APIs")
    repository.delete.return_value = 1
    responsibilities = MagicMock()
    responsibilities.select_all_by_job_opening.return_value = [
        ResponsibilityDTO(id=1, job_opening_id=8, description="Write code"),
        ResponsibilityDTO(id=2, job_opening_id=8, description="Review code"),
    ]
    service = JobOpeningService(notifier, repository, responsibilities)

    result = service.delete(8)

    assert result.kind is ResultKind.OK
    responsibilities.select_all_by_job_opening.assert_called_once_with(8)
    assert responsibilities.delete.call_args_list == [call(1), call(2)]


# ─── Reads ───────────────────────────────────────────────────────────

def test_select_by_id_missing_returns_none(notifier, repository):
    repository.select_by_id.return_value = None
    service = make_company_service(notifier, repository)

    assert service.select_by_id(1) is None
    service.address_service.select_all_by_company.assert_not_called()


def test_job_opening_select_by_id_attaches_responsibilities(notifier, repository):
    repository.select_by_id.return_value = entities.JobOpening(id=8, title="Backend", summary="Build the APIs")
    responsibilities = MagicMock()
    responsibilities.select_all_by_job_opening.return_value = [ResponsibilityDTO(id=1, job_opening_id=8,
                                                                                  description="Write code")]
    service = JobOpeningService(notifier, repository, responsibilities)

    job_opening = service.select_by_id(8)

    assert isinstance(job_opening, JobOpeningDTO)
    assert job_opening.title == "Backend"
    assert [r.id for r in job_opening.responsibilities] == [1]


def test_rule_sets_are_immutable():
    assert CrudService.rules == ()
    for service_cls in (GenderService, AddressService, CompanyService, CandidateService, JobOpeningService,
                        InterviewService, CompanyTechnologyRelService, JobInterviewWeightService):
        assert isinstance(service_cls.rules, tuple)
