from django.contrib import admin
from rangefilter.filters import DateRangeFilter

from ats.core.utils.admin.filter import (
    SearchByNameAndFilterByDate, AdminFilterByDate
)
from ats.recruitment.models import (
    Candidate, Comment, Blacklist, Company, Vacancy, VacancyFilters,
    CandidateVacancyStatus, CandidateVacancy
)


class CandidateAdmin(admin.ModelAdmin):
    search_fields = ['name', 'email', 'document_number']
    list_display = ['name', 'email', 'country', 'stars', 'deleted', 'blacklisted']
    list_filter = [
        'deleted',
        'blacklisted',
        'is_in_company',
        ('created_at', DateRangeFilter)
    ]
    raw_id_fields = ['source']


admin.site.register(Candidate, CandidateAdmin)
admin.site.register(Comment, AdminFilterByDate)
admin.site.register(Blacklist, AdminFilterByDate)
admin.site.register(Company, SearchByNameAndFilterByDate)


class VacancyAdmin(admin.ModelAdmin):
    search_fields = ['title', 'company__name']
    list_display = ['title', 'company', 'status', 'assigned_to', 'created_at']
    list_filter = [
        'status',
        ('created_at', DateRangeFilter)
    ]


admin.site.register(Vacancy, VacancyAdmin)
admin.site.register(VacancyFilters)


class CandidateVacancyStatusAdmin(admin.ModelAdmin):
    list_display = ['name', 'sort', 'is_initial']
    # ranks are kept dense by the API
    readonly_fields = ['sort', 'is_initial']


admin.site.register(CandidateVacancyStatus, CandidateVacancyStatusAdmin)
admin.site.register(CandidateVacancy, AdminFilterByDate)
