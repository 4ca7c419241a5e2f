from rest_framework.routers import DefaultRouter

from .views.lookup import (
    AreaViewSet, IndustryViewSet, SeniorityViewSet,
    CandidateSourceViewSet, VacancyStatusViewSet,
    CandidateFileViewSet
)

app_name = 'commons'

router = DefaultRouter()

router.register('area', AreaViewSet, basename='area')
router.register('industry', IndustryViewSet, basename='industry')
router.register('seniority', SeniorityViewSet, basename='seniority')
router.register('candidate-source', CandidateSourceViewSet,
                basename='candidate-source')
router.register('vacancy-status', VacancyStatusViewSet,
                basename='vacancy-status')
router.register('candidate-file', CandidateFileViewSet,
                basename='candidate-file')

urlpatterns = router.urls
