import logging

from django.core.management import BaseCommand, CommandError
from django.db import transaction
from django.db.models import ProtectedError

from ats.common.models import (
    Area, CandidateSource, Industry, Seniority, VacancyStatus
)
from ats.core.seeder import (
    AREAS, CANDIDATE_SOURCES, INDUSTRIES, SENIORITIES, VACANCY_STATUSES,
    CANDIDATE_VACANCY_STATUSES
)
from ats.recruitment.models import CandidateVacancyStatus
from ats.recruitment.utils.pipeline import create_status

logger = logging.getLogger(__name__)

LOOKUPS = (
    (Area, AREAS),
    (CandidateSource, CANDIDATE_SOURCES),
    (Industry, INDUSTRIES),
    (Seniority, SENIORITIES),
    (VacancyStatus, VACANCY_STATUSES),
)


class Command(BaseCommand):
    help = 'Migrate initial data to database.'

    def add_arguments(self, parser):
        parser.add_argument(
            '--reset',
            action='store_true',
            help='Remove the seeded tables before seeding them again.'
        )

    def handle(self, *args, **options):
        if options['reset']:
            self.reset()
        for model, names in LOOKUPS:
            self.seed_lookup(model, names)
        self.seed_pipeline()
        logger.info('Seeded initial data')

    def reset(self):
        try:
            with transaction.atomic():
                CandidateVacancyStatus.objects.all().delete()
                for model, _ in LOOKUPS:
                    model.objects.all().delete()
        except ProtectedError as e:
            raise CommandError(f"Could not reset, seeded rows are in use: {e}")
        self.stdout.write("Removed seeded data ...")

    def seed_lookup(self, model, names):
        for name in names:
            model.objects.get_or_create(name=name)
        self.stdout.write(f"Created {model._meta.verbose_name_plural.title()} ...")

    def seed_pipeline(self):
        existing = set(CandidateVacancyStatus.objects.values_list('name', flat=True))
        has_initial = CandidateVacancyStatus.objects.filter(is_initial=True).exists()
        for name in CANDIDATE_VACANCY_STATUSES:
            if name in existing:
                continue
            # appended, so the pipeline keeps its order
            create_status(
                name,
                sort=CandidateVacancyStatus.objects.count(),
                is_initial=not has_initial
            )
            has_initial = True
        self.stdout.write("Created Candidate Vacancy Statuses ...")
