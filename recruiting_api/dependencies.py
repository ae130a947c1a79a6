"""
FastAPI dependencies that build services.

Each request gets its own session (get_db) and its own notification
collector (get_notifier). FastAPI caches both within a request, so every
service built for the same request, children included, reports into the
same collector.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from recruiting_api.database import get_db
from recruiting_api.notification import NotificationCollector, get_notifier
from recruiting_api.repositories.aggregates import (
    AddressRepository, CandidateRepository, CompanyRepository, JobOpeningRepository, ResponsibilityRepository,
)
from recruiting_api.repositories.lookups import GenderRepository, TechnologyRepository
from recruiting_api.repositories.relations import (
    CandidateTechnologyRepository, CompanyTechnologyRepository, InterviewRepository, JobInterviewWeightRepository,
)
from recruiting_api.repositories.report import ReportCandidateRepository
from recruiting_api.services.address import AddressService
from recruiting_api.services.candidate import CandidateService
from recruiting_api.services.company import CompanyService
from recruiting_api.services.job_opening import JobOpeningService, ResponsibilityService
from recruiting_api.services.lookups import GenderService, TechnologyService
from recruiting_api.services.relations import (
    CandidateTechnologyRelService, CompanyTechnologyRelService, InterviewService, JobInterviewWeightService,
)
from recruiting_api.services.report import ReportCandidateService


# ─── Lookups ─────────────────────────────────────────────────────────

def get_gender_service(db: Session = Depends(get_db),
                       notifier: NotificationCollector = Depends(get_notifier)) -> GenderService:
    return GenderService(notifier, GenderRepository(db))


def get_technology_service(db: Session = Depends(get_db),
                           notifier: NotificationCollector = Depends(get_notifier)) -> TechnologyService:
    return TechnologyService(notifier, TechnologyRepository(db))


# ─── Owned rows and relations ────────────────────────────────────────

def get_address_service(db: Session = Depends(get_db),
                        notifier: NotificationCollector = Depends(get_notifier)) -> AddressService:
    return AddressService(notifier, AddressRepository(db))


def get_company_technology_service(db: Session = Depends(get_db),
                                   notifier: NotificationCollector = Depends(get_notifier)
                                   ) -> CompanyTechnologyRelService:
    return CompanyTechnologyRelService(notifier, CompanyTechnologyRepository(db))


def get_candidate_technology_service(db: Session = Depends(get_db),
                                     notifier: NotificationCollector = Depends(get_notifier)
                                     ) -> CandidateTechnologyRelService:
    return CandidateTechnologyRelService(notifier, CandidateTechnologyRepository(db))


def get_responsibility_service(db: Session = Depends(get_db),
                               notifier: NotificationCollector = Depends(get_notifier)) -> ResponsibilityService:
    return ResponsibilityService(notifier, ResponsibilityRepository(db))


def get_interview_service(db: Session = Depends(get_db),
                          notifier: NotificationCollector = Depends(get_notifier)) -> InterviewService:
    return InterviewService(notifier, InterviewRepository(db))


def get_job_interview_weight_service(db: Session = Depends(get_db),
                                     notifier: NotificationCollector = Depends(get_notifier)
                                     ) -> JobInterviewWeightService:
    return JobInterviewWeightService(notifier, JobInterviewWeightRepository(db))


# ─── Aggregate roots ─────────────────────────────────────────────────

def get_company_service(
    db: Session = Depends(get_db),
    notifier: NotificationCollector = Depends(get_notifier),
    address_service: AddressService = Depends(get_address_service),
    technology_service: CompanyTechnologyRelService = Depends(get_company_technology_service),
) -> CompanyService:
    return CompanyService(notifier, CompanyRepository(db), address_service, technology_service)


def get_candidate_service(
    db: Session = Depends(get_db),
    notifier: NotificationCollector = Depends(get_notifier),
    address_service: AddressService = Depends(get_address_service),
    technology_service: CandidateTechnologyRelService = Depends(get_candidate_technology_service),
) -> CandidateService:
    return CandidateService(notifier, CandidateRepository(db), address_service, technology_service)


def get_job_opening_service(
    db: Session = Depends(get_db),
    notifier: NotificationCollector = Depends(get_notifier),
    responsibility_service: ResponsibilityService = Depends(get_responsibility_service),
) -> JobOpeningService:
    return JobOpeningService(notifier, JobOpeningRepository(db), responsibility_service)


def get_report_service(db: Session = Depends(get_db)) -> ReportCandidateService:
    return ReportCandidateService(ReportCandidateRepository(db))
