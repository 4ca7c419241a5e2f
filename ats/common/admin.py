from django.contrib import admin

from ats.common.models import (
    Area, Industry, Seniority, CandidateSource, VacancyStatus, CandidateFile
)
from ats.core.utils.admin.filter import SearchByName

admin.site.register(Area, SearchByName)
admin.site.register(Industry, SearchByName)
admin.site.register(Seniority, SearchByName)
admin.site.register(CandidateSource, SearchByName)
admin.site.register(VacancyStatus, SearchByName)


class CandidateFileAdmin(admin.ModelAdmin):
    search_fields = ['name', 'url']
    list_display = ['name', 'url']


admin.site.register(CandidateFile, CandidateFileAdmin)
