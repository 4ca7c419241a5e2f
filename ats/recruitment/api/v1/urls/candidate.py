from rest_framework.routers import SimpleRouter

from ats.recruitment.api.v1.views.blacklist import BlacklistViewSet
from ats.recruitment.api.v1.views.candidate import CandidateViewSet
from ats.recruitment.api.v1.views.comment import CommentViewSet

router = SimpleRouter()
router.register('candidate', CandidateViewSet, basename='candidate')
router.register('comment', CommentViewSet, basename='comment')
router.register('blacklist', BlacklistViewSet, basename='blacklist')

urlpatterns = router.urls
