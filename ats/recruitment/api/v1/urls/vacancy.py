from rest_framework.routers import SimpleRouter

from ats.recruitment.api.v1.views.company import CompanyViewSet
from ats.recruitment.api.v1.views.vacancy import VacancyViewSet

router = SimpleRouter()
router.register('company', CompanyViewSet, basename='company')
router.register('vacancy', VacancyViewSet, basename='vacancy')

urlpatterns = router.urls
