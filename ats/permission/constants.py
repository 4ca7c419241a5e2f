ADMIN, RECRUITER = 'ADMIN', 'RECRUITER'

ROLE_CHOICES = (
    (ADMIN, 'Admin'),
    (RECRUITER, 'Recruiter'),
)
