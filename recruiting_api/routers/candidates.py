"""
Candidates router.

Endpoints:
- GET    /api/candidates/all   - list candidates (no children)
- GET    /api/candidates/{id}  - one candidate with addresses and technologies
- POST   /api/candidates       - create a candidate and its children
- PUT    /api/candidates/{id}  - update a candidate; new children are inserted
- DELETE /api/candidates/{id}  - delete a candidate and its addresses
"""

from fastapi import APIRouter, Depends, Request

from recruiting_api.dependencies import get_candidate_service
from recruiting_api.domain import messages
from recruiting_api.notification import NotificationCollector, get_notifier
from recruiting_api.routers.common import RecordId, failure, not_found, respond, success
from recruiting_api.schemas import CandidateDTO
from recruiting_api.services.candidate import CandidateService

router = APIRouter()


@router.get("/candidates/all")
def list_candidates(service: CandidateService = Depends(get_candidate_service)):
    return success(service.select_all())


@router.get("/candidates/{candidate_id}")
def get_candidate(candidate_id: RecordId, request: Request,
                  service: CandidateService = Depends(get_candidate_service),
                  notifier: NotificationCollector = Depends(get_notifier)):
    candidate = service.select_by_id(candidate_id)
    if candidate is None:
        return not_found(request, notifier)
    return success(candidate)


@router.post("/candidates", status_code=201)
def create_candidate(data: CandidateDTO, request: Request,
                     service: CandidateService = Depends(get_candidate_service),
                     notifier: NotificationCollector = Depends(get_notifier)):
    result = service.insert(data)
    return respond(request, notifier, result, data, status_code=201)


@router.put("/candidates/{candidate_id}")
def update_candidate(candidate_id: RecordId, data: CandidateDTO, request: Request,
                     service: CandidateService = Depends(get_candidate_service),
                     notifier: NotificationCollector = Depends(get_notifier)):
    if candidate_id != data.id:
        notifier.handle(messages.ID_MISMATCH)
        return failure(request, notifier.get_notification())
    if service.select_by_id(candidate_id) is None:
        return not_found(request, notifier)

    result = service.update(data)
    return respond(request, notifier, result, data)


@router.delete("/candidates/{candidate_id}", status_code=204)
def delete_candidate(candidate_id: RecordId, request: Request,
                     service: CandidateService = Depends(get_candidate_service),
                     notifier: NotificationCollector = Depends(get_notifier)):
    result = service.delete(candidate_id)
    return respond(request, notifier, result, status_code=204)
