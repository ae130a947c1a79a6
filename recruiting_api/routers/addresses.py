"""
Addresses router. Addresses are written through their company or
candidate; only reads and single deletes are exposed here.

Endpoints:
- GET    /api/addresses/{id}
- GET    /api/addresses/company/{company_id}
- GET    /api/addresses/candidate/{candidate_id}
- DELETE /api/addresses/{id}
"""

from fastapi import APIRouter, Depends, Request

from recruiting_api.dependencies import get_address_service
from recruiting_api.notification import NotificationCollector, get_notifier
from recruiting_api.routers.common import RecordId, not_found, respond, success
from recruiting_api.services.address import AddressService

router = APIRouter()


@router.get("/addresses/company/{company_id}")
def list_company_addresses(company_id: RecordId, service: AddressService = Depends(get_address_service)):
    return success(service.select_all_by_company(company_id))


@router.get("/addresses/candidate/{candidate_id}")
def list_candidate_addresses(candidate_id: RecordId, service: AddressService = Depends(get_address_service)):
    return success(service.select_all_by_candidate(candidate_id))


@router.get("/addresses/{address_id}")
def get_address(address_id: RecordId, request: Request,
                service: AddressService = Depends(get_address_service),
                notifier: NotificationCollector = Depends(get_notifier)):
    address = service.select_by_id(address_id)
    if address is None:
        return not_found(request, notifier)
    return success(address)


@router.delete("/addresses/{address_id}", status_code=204)
def delete_address(address_id: RecordId, request: Request,
                   service: AddressService = Depends(get_address_service),
                   notifier: NotificationCollector = Depends(get_notifier)):
    result = service.delete(address_id)
    return respond(request, notifier, result, status_code=204)
