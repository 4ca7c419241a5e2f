"""
Candidates move through a vacancy's pipeline:

1. A candidate is attached to a vacancy (CandidateVacancy) and lands on the
   initial pipeline status unless another status is given.

2. Recruiters move the entry along the pipeline statuses, which are ordered by
   their `sort` rank. The highest ranked status is the last stage.

3. Candidates can be blacklisted at any point; blacklisted and soft deleted
   candidates are hidden from candidate listings unless asked for.
"""

ACTIVO, INACTIVO = 'ACTIVO', 'INACTIVO'

COMPANY_STATUS_CHOICES = (
    (ACTIVO, 'Activo'),
    (INACTIVO, 'Inactivo'),
)

DELETED_SUFFIX = ' (deleted)'

USER_ID_MISMATCH = 'User ID mismatch'
COMMENT_TOO_OLD = 'Comment is older than 1 day'
