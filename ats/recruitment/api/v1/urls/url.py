from django.urls import path, include

from ats.recruitment.api.v1.views.dashboard import DashboardView

app_name = 'recruitment'

urlpatterns = [
    path('', include('ats.recruitment.api.v1.urls.candidate')),
    path('', include('ats.recruitment.api.v1.urls.vacancy')),
    path('', include('ats.recruitment.api.v1.urls.pipeline')),
    path('dashboard/', DashboardView.as_view(), name='dashboard'),
]
