# Common file that is responsible to admin customization for search and filter

from django.contrib import admin
from rangefilter.filters import DateRangeFilter


class SearchByName(admin.ModelAdmin):
    list_display = (
        'id',
        'name',
    )
    search_fields = ('name',)


class SearchByNameAndFilterByDate(admin.ModelAdmin):
    list_display = (
        'name',
        'created_at',
        'modified_at',
    )
    search_fields = ('name',)
    list_filter = (
        ('created_at', DateRangeFilter),
    )


class AdminFilterByDate(admin.ModelAdmin):
    list_display = (
        '__str__',
        'created_at',
    )
    list_filter = (
        ('created_at', DateRangeFilter),
    )
