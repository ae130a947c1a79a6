"""
Lookup tables router: genders and technologies.

Both expose the same five endpoints under /api/genders and /api/technologies:
GET /all, GET /{id}, POST, PUT /{id}, DELETE /{id}.
"""

from fastapi import APIRouter, Depends, Request

from recruiting_api.dependencies import get_gender_service, get_technology_service
from recruiting_api.domain import messages
from recruiting_api.notification import NotificationCollector, get_notifier
from recruiting_api.routers.common import RecordId, failure, not_found, respond, success
from recruiting_api.schemas import GenderDTO, TechnologyDTO
from recruiting_api.services.lookups import GenderService, TechnologyService

router = APIRouter()


# ─── Genders ─────────────────────────────────────────────────────────

@router.get("/genders/all")
def list_genders(service: GenderService = Depends(get_gender_service)):
    return success(service.select_all())


@router.get("/genders/{gender_id}")
def get_gender(gender_id: RecordId, request: Request,
               service: GenderService = Depends(get_gender_service),
               notifier: NotificationCollector = Depends(get_notifier)):
    gender = service.select_by_id(gender_id)
    if gender is None:
        return not_found(request, notifier)
    return success(gender)


@router.post("/genders", status_code=201)
def create_gender(data: GenderDTO, request: Request,
                  service: GenderService = Depends(get_gender_service),
                  notifier: NotificationCollector = Depends(get_notifier)):
    result = service.insert(data)
    return respond(request, notifier, result, data, status_code=201)


@router.put("/genders/{gender_id}")
def update_gender(gender_id: RecordId, data: GenderDTO, request: Request,
                  service: GenderService = Depends(get_gender_service),
                  notifier: NotificationCollector = Depends(get_notifier)):
    if gender_id != data.id:
        notifier.handle(messages.ID_MISMATCH)
        return failure(request, notifier.get_notification())
    if service.select_by_id(gender_id) is None:
        return not_found(request, notifier)

    result = service.update(data)
    return respond(request, notifier, result, data)


@router.delete("/genders/{gender_id}", status_code=204)
def delete_gender(gender_id: RecordId, request: Request,
                  service: GenderService = Depends(get_gender_service),
                  notifier: NotificationCollector = Depends(get_notifier)):
    result = service.delete(gender_id)
    return respond(request, notifier, result, status_code=204)


# ─── Technologies ────────────────────────────────────────────────────

@router.get("/technologies/all")
def list_technologies(service: TechnologyService = Depends(get_technology_service)):
    return success(service.select_all())


@router.get("/technologies/{technology_id}")
def get_technology(technology_id: RecordId, request: Request,
                   service: TechnologyService = Depends(get_technology_service),
                   notifier: NotificationCollector = Depends(get_notifier)):
    technology = service.select_by_id(technology_id)
    if technology is None:
        return not_found(request, notifier)
    return success(technology)


@router.post("/technologies", status_code=201)
def create_technology(data: TechnologyDTO, request: Request,
                      service: TechnologyService = Depends(get_technology_service),
                      notifier: NotificationCollector = Depends(get_notifier)):
    result = service.insert(data)
    return respond(request, notifier, result, data, status_code=201)


@router.put("/technologies/{technology_id}")
def update_technology(technology_id: RecordId, data: TechnologyDTO, request: Request,
                      service: TechnologyService = Depends(get_technology_service),
                      notifier: NotificationCollector = Depends(get_notifier)):
    if technology_id != data.id:
        notifier.handle(messages.ID_MISMATCH)
        return failure(request, notifier.get_notification())
    if service.select_by_id(technology_id) is None:
        return not_found(request, notifier)

    result = service.update(data)
    return respond(request, notifier, result, data)


@router.delete("/technologies/{technology_id}", status_code=204)
def delete_technology(technology_id: RecordId, request: Request,
                      service: TechnologyService = Depends(get_technology_service),
                      notifier: NotificationCollector = Depends(get_notifier)):
    result = service.delete(technology_id)
    return respond(request, notifier, result, status_code=204)
