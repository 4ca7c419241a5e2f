from django.db import migrations, models


def lookup_model(name, **options):
    return migrations.CreateModel(
        name=name,
        fields=[
            ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
            ('name', models.CharField(db_index=True, max_length=255, unique=True)),
        ],
        options={
            'ordering': ('id',),
            'abstract': False,
            **options,
        },
    )


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        lookup_model('Area'),
        lookup_model('Industry', verbose_name_plural='industries'),
        lookup_model('Seniority', verbose_name_plural='seniorities'),
        lookup_model('CandidateSource'),
        lookup_model('VacancyStatus', verbose_name_plural='vacancy statuses'),
        migrations.CreateModel(
            name='CandidateFile',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('url', models.URLField(max_length=1000)),
            ],
            options={
                'ordering': ('id',),
            },
        ),
    ]
