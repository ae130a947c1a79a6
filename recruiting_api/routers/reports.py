"""
Reports router.

Endpoints:
- GET /api/reports/all - candidate scores per available job opening, best first
"""

from fastapi import APIRouter, Depends

from recruiting_api.dependencies import get_report_service
from recruiting_api.routers.common import success
from recruiting_api.services.report import ReportCandidateService

router = APIRouter()


@router.get("/reports/all")
def candidate_report(service: ReportCandidateService = Depends(get_report_service)):
    return success(service.select_report_candidate())
