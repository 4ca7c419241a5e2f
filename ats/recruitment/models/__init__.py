from .candidate import Candidate, Comment, Blacklist
from .company import Company
from .vacancy import VacancyFilters, Vacancy
from .pipeline import CandidateVacancyStatus, CandidateVacancy
