AREAS = ['IT', 'Ingenieria', 'RRHH']

CANDIDATE_SOURCES = ['LinkedIn', 'Twitter', 'Facebook']

INDUSTRIES = ['Industria 1', 'Industria 2', 'Industria 3']

SENIORITIES = ['Junior', 'Semisenior', 'Senior', 'Lead']

VACANCY_STATUSES = ['Abierta', 'En pausa', 'Cerrada', 'Open']

# in pipeline order, the first one is the initial status
CANDIDATE_VACANCY_STATUSES = [
    'Nuevo',
    'Contactado',
    'Entrevista',
    'Oferta',
    'Contratado',
]
