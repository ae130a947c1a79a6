"""
Companies router.

Endpoints:
- GET    /api/companies/all   - list companies (no children)
- GET    /api/companies/{id}  - one company with its addresses and technologies
- POST   /api/companies       - create a company and its children
- PUT    /api/companies/{id}  - update a company; new children are inserted
- DELETE /api/companies/{id}  - delete a company and its addresses
"""

from fastapi import APIRouter, Depends, Request

from recruiting_api.dependencies import get_company_service
from recruiting_api.domain import messages
from recruiting_api.notification import NotificationCollector, get_notifier
from recruiting_api.routers.common import RecordId, failure, not_found, respond, success
from recruiting_api.schemas import CompanyDTO
from recruiting_api.services.company import CompanyService

router = APIRouter()


@router.get("/companies/all")
def list_companies(service: CompanyService = Depends(get_company_service)):
    return success(service.select_all())


@router.get("/companies/{company_id}")
def get_company(company_id: RecordId, request: Request,
                service: CompanyService = Depends(get_company_service),
                notifier: NotificationCollector = Depends(get_notifier)):
    company = service.select_by_id(company_id)
    if company is None:
        return not_found(request, notifier)
    return success(company)


@router.post("/companies", status_code=201)
def create_company(data: CompanyDTO, request: Request,
                   service: CompanyService = Depends(get_company_service),
                   notifier: NotificationCollector = Depends(get_notifier)):
    """Create a company. The answer carries the new id; children failures answer 400."""
    result = service.insert(data)
    return respond(request, notifier, result, data, status_code=201)


@router.put("/companies/{company_id}")
def update_company(company_id: RecordId, data: CompanyDTO, request: Request,
                   service: CompanyService = Depends(get_company_service),
                   notifier: NotificationCollector = Depends(get_notifier)):
    if company_id != data.id:
        notifier.handle(messages.ID_MISMATCH)
        return failure(request, notifier.get_notification())
    if service.select_by_id(company_id) is None:
        return not_found(request, notifier)

    result = service.update(data)
    return respond(request, notifier, result, data)


@router.delete("/companies/{company_id}", status_code=204)
def delete_company(company_id: RecordId, request: Request,
                   service: CompanyService = Depends(get_company_service),
                   notifier: NotificationCollector = Depends(get_notifier)):
    result = service.delete(company_id)
    return respond(request, notifier, result, status_code=204)
