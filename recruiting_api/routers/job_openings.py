"""
Job openings router.

Endpoints:
- GET    /api/job-openings/all        - list every opening
- GET    /api/job-openings/available  - list openings still accepting candidates
- GET    /api/job-openings/{id}       - one opening with its responsibilities
- POST   /api/job-openings            - create an opening and its responsibilities
- PUT    /api/job-openings/{id}       - update an opening
- DELETE /api/job-openings/{id}       - delete an opening and its responsibilities
"""

from fastapi import APIRouter, Depends, Request

from recruiting_api.dependencies import get_job_opening_service
from recruiting_api.domain import messages
from recruiting_api.notification import NotificationCollector, get_notifier
from recruiting_api.routers.common import RecordId, failure, not_found, respond, success
from recruiting_api.schemas import JobOpeningDTO
from recruiting_api.services.job_opening import JobOpeningService

router = APIRouter()


@router.get("/job-openings/all")
def list_job_openings(service: JobOpeningService = Depends(get_job_opening_service)):
    return success(service.select_all())


@router.get("/job-openings/available")
def list_available_job_openings(service: JobOpeningService = Depends(get_job_opening_service)):
    return success(service.select_all_available())


@router.get("/job-openings/{job_opening_id}")
def get_job_opening(job_opening_id: RecordId, request: Request,
                    service: JobOpeningService = Depends(get_job_opening_service),
                    notifier: NotificationCollector = Depends(get_notifier)):
    job_opening = service.select_by_id(job_opening_id)
    if job_opening is None:
        return not_found(request, notifier)
    return success(job_opening)


@router.post("/job-openings", status_code=201)
def create_job_opening(data: JobOpeningDTO, request: Request,
                       service: JobOpeningService = Depends(get_job_opening_service),
                       notifier: NotificationCollector = Depends(get_notifier)):
    result = service.insert(data)
    return respond(request, notifier, result, data, status_code=201)


@router.put("/job-openings/{job_opening_id}")
def update_job_opening(job_opening_id: RecordId, data: JobOpeningDTO, request: Request,
                       service: JobOpeningService = Depends(get_job_opening_service),
                       notifier: NotificationCollector = Depends(get_notifier)):
    if job_opening_id != data.id:
        notifier.handle(messages.ID_MISMATCH)
        return failure(request, notifier.get_notification())
    if service.select_by_id(job_opening_id) is None:
        return not_found(request, notifier)

    result = service.update(data)
    return respond(request, notifier, result, data)


@router.delete("/job-openings/{job_opening_id}", status_code=204)
def delete_job_opening(job_opening_id: RecordId, request: Request,
                       service: JobOpeningService = Depends(get_job_opening_service),
                       notifier: NotificationCollector = Depends(get_notifier)):
    result = service.delete(job_opening_id)
    return respond(request, notifier, result, status_code=204)
