from django.urls import path, include
from rest_framework_simplejwt.views import TokenRefreshView

from ats.users.api.v1.serializers.auth import CustomTokenObtainView

app_name = 'api_v1'

urlpatterns = [
    # authentication urls
    path('auth/', include((
        [
            path('obtain/', CustomTokenObtainView.as_view(), name='obtain'),
            path('refresh/', TokenRefreshView.as_view(), name='refresh'),
        ], 'jwt'))),

    # modules
    path('users/', include('ats.users.api.v1.urls')),
    path('commons/', include('ats.common.api.urls')),

    # Recruitment
    path('recruitment/', include('ats.recruitment.api.v1.urls.url')),
]
