from rest_framework.routers import SimpleRouter

from ats.users.api.v1.views.user import UserViewSet

app_name = 'users'

router = SimpleRouter()
router.register('', UserViewSet, basename='users')

urlpatterns = router.urls
