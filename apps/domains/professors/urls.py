from rest_framework.routers import SimpleRouter
from .views import ProfessorViewSet

router = SimpleRouter()
router.register(r"", ProfessorViewSet, basename="professor")

urlpatterns = router.urls
