from ats.permission.constants import ADMIN, RECRUITER
from ats.permission.permission_classes import permission_factory

RecruitmentPermission = permission_factory.build_permission(
    "RecruitmentPermission",
    allowed_to=[ADMIN, RECRUITER]
)

CandidateVacancyStatusPermission = permission_factory.build_permission(
    "CandidateVacancyStatusPermission",
    limit_read_to=[ADMIN, RECRUITER],
    limit_write_to=[ADMIN]
)
