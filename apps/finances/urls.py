from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'finances'

router = SimpleRouter(trailing_slash=False)
router.register(r'finances', views.FinanceViewSet, basename='finance')

urlpatterns = [
    # GET    /api/finances               - List entries (type, currency)
    # POST   /api/finances               - Record an entry
    # GET    /api/finances/charts        - Monthly and currency series
    path('', include(router.urls)),
]
