"""Response shapes shared by the submission endpoints."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.memories.dtos import SubmissionDTO
from src.stats.dtos import SubmissionStats


class SubmissionResponse(BaseModel):
    id: UUID
    guest_name: str | None = None
    display_name: str
    message: str
    photo_url: str
    table_number: int | None = None
    created_at: datetime

    @classmethod
    def from_dto(cls, submission: SubmissionDTO) -> "SubmissionResponse":
        return cls(
            id=submission.id,
            guest_name=submission.guest_name,
            display_name=submission.display_name,
            message=submission.message,
            photo_url=submission.photo_url,
            table_number=submission.table_number,
            created_at=submission.created_at,
        )


class SubmissionStatsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total: int
    by_table: dict[int, int] = Field(alias="byTable")

    @classmethod
    def from_stats(cls, stats: SubmissionStats) -> "SubmissionStatsResponse":
        return cls(total=stats.total, by_table=stats.by_table)
