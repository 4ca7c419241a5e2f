from .abstract import TimeStampedModel, BaseModel, NamedLookupModel
from .lookup import (
    Area,
    Industry,
    Seniority,
    CandidateSource,
    VacancyStatus,
    CandidateFile,
)
