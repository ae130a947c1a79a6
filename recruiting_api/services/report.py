from recruiting_api.mapping import to_dtos
from recruiting_api.repositories.report import ReportCandidateRepository
from recruiting_api.schemas import ReportCandidateDTO


class ReportCandidateService:
    def __init__(self, repository: ReportCandidateRepository):
        self.repository = repository

    def select_report_candidate(self) -> list[ReportCandidateDTO]:
        return to_dtos(ReportCandidateDTO, self.repository.select_report_candidate())
