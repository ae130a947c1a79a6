"""
Candidate scoring report.

A candidate scores, for every available job opening, the sum of the
opening's interview weights over the technologies the candidate knows.
Rows are grouped by candidate and job title, best score first.
"""

from sqlalchemy import func
from sqlalchemy.orm import Session

from recruiting_api import models
from recruiting_api.domain.entities import ReportCandidate


class ReportCandidateRepository:
    def __init__(self, db: Session):
        self.db = db

    def select_report_candidate(self) -> list[ReportCandidate]:
        total_score = func.sum(models.JobInterviewWeight.weight).label("total_score")
        rows = (
            self.db.query(
                models.Candidate.id,
                models.Candidate.first_name,
                models.Candidate.last_name,
                models.JobOpening.title,
                total_score,
            )
            .join(models.CandidateTechnology, models.CandidateTechnology.candidate_id == models.Candidate.id)
            .join(models.JobInterviewWeight, models.JobInterviewWeight.technology_id == models.CandidateTechnology.technology_id)
            .join(models.JobOpening, models.JobOpening.id == models.JobInterviewWeight.job_opening_id)
            .filter(models.JobOpening.available.is_(True))
            .group_by(
                models.Candidate.id,
                models.Candidate.first_name,
                models.Candidate.last_name,
                models.JobOpening.title,
            )
            .order_by(total_score.desc(), models.Candidate.id)
            .all()
        )
        return [
            ReportCandidate(
                candidate_id=row.id,
                full_name=f"{row.first_name} {row.last_name}",
                job_title=row.title,
                total_score=int(row.total_score or 0),
            )
            for row in rows
        ]
