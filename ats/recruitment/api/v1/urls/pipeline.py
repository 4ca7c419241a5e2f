from rest_framework.routers import SimpleRouter

from ats.recruitment.api.v1.views.pipeline import (
    CandidateVacancyStatusViewSet, CandidateVacancyViewSet
)

router = SimpleRouter()
router.register('candidate-vacancy-status', CandidateVacancyStatusViewSet,
                basename='candidate-vacancy-status')
router.register('candidate-vacancy', CandidateVacancyViewSet,
                basename='candidate-vacancy')

urlpatterns = router.urls
