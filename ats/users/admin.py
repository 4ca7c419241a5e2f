from django.contrib import admin
from rangefilter.filters import DateRangeFilter

from ats.users.models import User


class UserAdmin(admin.ModelAdmin):
    search_fields = ['email', 'name']
    list_display = ['email', 'name', 'role', 'is_active', 'last_login']
    list_filter = [
        'role',
        'is_active',
        ('created_at', DateRangeFilter)
    ]
    exclude = ['password']


admin.site.register(User, UserAdmin)
