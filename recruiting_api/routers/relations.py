"""
Relation rows router: technology links, interviews and interview weights.

Endpoints:
- GET    /api/company-technologies/company/{company_id}
- POST   /api/company-technologies
- DELETE /api/company-technologies/{id}
- GET    /api/candidate-technologies/candidate/{candidate_id}
- POST   /api/candidate-technologies
- DELETE /api/candidate-technologies/{id}
- GET    /api/interviews/all
- GET    /api/interviews/{id}
- POST   /api/interviews
- DELETE /api/interviews/{id}
- GET    /api/job-interview-weights/job-opening/{job_opening_id}
- POST   /api/job-interview-weights
- DELETE /api/job-interview-weights/{id}
"""

from fastapi import APIRouter, Depends, Request

from recruiting_api.dependencies import (
    get_candidate_technology_service, get_company_technology_service, get_interview_service,
    get_job_interview_weight_service,
)
from recruiting_api.notification import NotificationCollector, get_notifier
from recruiting_api.routers.common import RecordId, not_found, respond, success
from recruiting_api.schemas import (
    CandidateTechnologyRelDTO, CompanyTechnologyRelDTO, InterviewDTO, JobInterviewWeightDTO,
)
from recruiting_api.services.relations import (
    CandidateTechnologyRelService, CompanyTechnologyRelService, InterviewService, JobInterviewWeightService,
)

router = APIRouter()


# ─── Company technologies ────────────────────────────────────────────

@router.get("/company-technologies/company/{company_id}")
def list_company_technologies(company_id: RecordId,
                              service: CompanyTechnologyRelService = Depends(get_company_technology_service)):
    return success(service.select_all_by_company(company_id))


@router.post("/company-technologies", status_code=201)
def link_company_technology(data: CompanyTechnologyRelDTO, request: Request,
                            service: CompanyTechnologyRelService = Depends(get_company_technology_service),
                            notifier: NotificationCollector = Depends(get_notifier)):
    result = service.insert(data)
    return respond(request, notifier, result, data, status_code=201)


@router.delete("/company-technologies/{link_id}", status_code=204)
def unlink_company_technology(link_id: RecordId, request: Request,
                              service: CompanyTechnologyRelService = Depends(get_company_technology_service),
                              notifier: NotificationCollector = Depends(get_notifier)):
    result = service.delete(link_id)
    return respond(request, notifier, result, status_code=204)


# ─── Candidate technologies ──────────────────────────────────────────

@router.get("/candidate-technologies/candidate/{candidate_id}")
def list_candidate_technologies(candidate_id: RecordId,
                                service: CandidateTechnologyRelService = Depends(get_candidate_technology_service)):
    return success(service.select_all_by_candidate(candidate_id))


@router.post("/candidate-technologies", status_code=201)
def link_candidate_technology(data: CandidateTechnologyRelDTO, request: Request,
                              service: CandidateTechnologyRelService = Depends(get_candidate_technology_service),
                              notifier: NotificationCollector = Depends(get_notifier)):
    result = service.insert(data)
    return respond(request, notifier, result, data, status_code=201)


@router.delete("/candidate-technologies/{link_id}", status_code=204)
def unlink_candidate_technology(link_id: RecordId, request: Request,
                                service: CandidateTechnologyRelService = Depends(get_candidate_technology_service),
                                notifier: NotificationCollector = Depends(get_notifier)):
    result = service.delete(link_id)
    return respond(request, notifier, result, status_code=204)


# ─── Interviews ──────────────────────────────────────────────────────

@router.get("/interviews/all")
def list_interviews(service: InterviewService = Depends(get_interview_service)):
    return success(service.select_all())


@router.get("/interviews/{interview_id}")
def get_interview(interview_id: RecordId, request: Request,
                  service: InterviewService = Depends(get_interview_service),
                  notifier: NotificationCollector = Depends(get_notifier)):
    interview = service.select_by_id(interview_id)
    if interview is None:
        return not_found(request, notifier)
    return success(interview)


@router.post("/interviews", status_code=201)
def create_interview(data: InterviewDTO, request: Request,
                     service: InterviewService = Depends(get_interview_service),
                     notifier: NotificationCollector = Depends(get_notifier)):
    result = service.insert(data)
    return respond(request, notifier, result, data, status_code=201)


@router.delete("/interviews/{interview_id}", status_code=204)
def delete_interview(interview_id: RecordId, request: Request,
                     service: InterviewService = Depends(get_interview_service),
                     notifier: NotificationCollector = Depends(get_notifier)):
    result = service.delete(interview_id)
    return respond(request, notifier, result, status_code=204)


# ─── Interview weights ───────────────────────────────────────────────

@router.get("/job-interview-weights/job-opening/{job_opening_id}")
def list_job_interview_weights(job_opening_id: RecordId,
                               service: JobInterviewWeightService = Depends(get_job_interview_weight_service)):
    return success(service.select_all_by_job_opening(job_opening_id))


@router.post("/job-interview-weights", status_code=201)
def create_job_interview_weight(data: JobInterviewWeightDTO, request: Request,
                                service: JobInterviewWeightService = Depends(get_job_interview_weight_service),
                                notifier: NotificationCollector = Depends(get_notifier)):
    result = service.insert(data)
    return respond(request, notifier, result, data, status_code=201)


@router.delete("/job-interview-weights/{weight_id}", status_code=204)
def delete_job_interview_weight(weight_id: RecordId, request: Request,
                                service: JobInterviewWeightService = Depends(get_job_interview_weight_service),
                                notifier: NotificationCollector = Depends(get_notifier)):
    result = service.delete(weight_id)
    return respond(request, notifier, result, status_code=204)
