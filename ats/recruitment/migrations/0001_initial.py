import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('common', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Candidate',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('modified_at', models.DateTimeField(auto_now=True)),
                ('name', models.CharField(db_index=True, max_length=255)),
                ('image', models.CharField(blank=True, max_length=1000)),
                ('date_of_birth', models.DateField(blank=True, null=True)),
                ('gender', models.CharField(blank=True, max_length=50)),
                ('short_description', models.TextField(blank=True)),
                ('email', models.EmailField(max_length=255)),
                ('linkedin', models.CharField(blank=True, max_length=255)),
                ('address', models.CharField(blank=True, max_length=255)),
                ('document_number', models.CharField(blank=True, max_length=100)),
                ('phone', models.CharField(blank=True, max_length=50)),
                ('country', models.CharField(blank=True, db_index=True, max_length=100)),
                ('provinces', models.JSONField(blank=True, default=list)),
                ('languages', models.JSONField(blank=True, default=list)),
                ('stars', models.DecimalField(blank=True, decimal_places=1, max_digits=3, null=True, validators=[django.core.validators.MinValueValidator(0)])),
                ('is_in_company', models.BooleanField(default=False)),
                ('deleted', models.BooleanField(db_index=True, default=False)),
                ('blacklisted', models.BooleanField(default=False)),
                ('areas', models.ManyToManyField(blank=True, related_name='candidates', to='common.area')),
                ('files', models.ManyToManyField(blank=True, related_name='candidates', to='common.candidatefile')),
                ('industries', models.ManyToManyField(blank=True, related_name='candidates', to='common.industry')),
                ('seniorities', models.ManyToManyField(blank=True, related_name='candidates', to='common.seniority')),
                ('source', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='candidates', to='common.candidatesource')),
            ],
            options={
                'ordering': ('-created_at', '-modified_at'),
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='Company',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('modified_at', models.DateTimeField(auto_now=True)),
                ('name', models.CharField(db_index=True, max_length=255)),
                ('description', models.TextField(blank=True)),
                ('status', models.CharField(choices=[('ACTIVO', 'Activo'), ('INACTIVO', 'Inactivo')], db_index=True, default='ACTIVO', max_length=20)),
                ('client_name', models.CharField(blank=True, max_length=255)),
                ('client_email', models.EmailField(blank=True, max_length=255)),
                ('client_phone', models.CharField(blank=True, max_length=50)),
            ],
            options={
                'ordering': ('id',),
                'verbose_name_plural': 'companies',
            },
        ),
        migrations.CreateModel(
            name='CandidateVacancyStatus',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('sort', models.PositiveIntegerField(db_index=True, default=0)),
                ('is_initial', models.BooleanField(default=False)),
            ],
            options={
                'ordering': ('sort', 'id'),
                'verbose_name_plural': 'candidate vacancy statuses',
            },
        ),
        migrations.CreateModel(
            name='VacancyFilters',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('min_stars', models.DecimalField(blank=True, decimal_places=1, max_digits=3, null=True, validators=[django.core.validators.MinValueValidator(0)])),
                ('gender', models.CharField(blank=True, max_length=50)),
                ('min_age', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('max_age', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('countries', models.JSONField(blank=True, default=list)),
                ('provinces', models.JSONField(blank=True, default=list)),
                ('languages', models.JSONField(blank=True, default=list)),
                ('areas', models.ManyToManyField(blank=True, related_name='vacancy_filters', to='common.area')),
                ('industries', models.ManyToManyField(blank=True, related_name='vacancy_filters', to='common.industry')),
                ('seniorities', models.ManyToManyField(blank=True, related_name='vacancy_filters', to='common.seniority')),
            ],
            options={
                'verbose_name_plural': 'vacancy filters',
            },
        ),
        migrations.CreateModel(
            name='Vacancy',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(db_index=True, max_length=255)),
                ('description', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('assigned_to', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='assigned_vacancies', to=settings.AUTH_USER_MODEL)),
                ('company', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='vacancies', to='recruitment.company')),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='created_vacancies', to=settings.AUTH_USER_MODEL)),
                ('filters', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='vacancy', to='recruitment.vacancyfilters')),
                ('status', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='vacancies', to='common.vacancystatus')),
            ],
            options={
                'ordering': ('-created_at', '-id'),
                'verbose_name_plural': 'vacancies',
            },
        ),
        migrations.CreateModel(
            name='Comment',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('comment', models.TextField()),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('candidate', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='comments', to='recruitment.candidate')),
                ('user', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='candidate_comments', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ('-created_at', '-id'),
            },
        ),
        migrations.CreateModel(
            name='Blacklist',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('reason', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('candidate', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='blacklist', to='recruitment.candidate')),
                ('user', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='blacklisted_candidates', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ('-created_at', '-id'),
            },
        ),
        migrations.CreateModel(
            name='CandidateVacancy',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('notes', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('candidate', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='candidate_vacancies', to='recruitment.candidate')),
                ('candidate_vacancy_status', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='candidate_vacancies', to='recruitment.candidatevacancystatus')),
                ('vacancy', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='candidates', to='recruitment.vacancy')),
            ],
            options={
                'ordering': ('-created_at', '-id'),
                'verbose_name_plural': 'candidate vacancies',
                'unique_together': {('candidate', 'vacancy')},
            },
        ),
    ]
