from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'timers'

router = SimpleRouter(trailing_slash=False)
router.register(r'timer-sessions', views.TimerSessionViewSet, basename='timersession')

urlpatterns = [
    # GET    /api/timer-sessions/current - Current (not stopped) session or null
    # POST   /api/timer-sessions         - Start a session
    # PATCH  /api/timer-sessions/{id}    - Update a session
    path('', include(router.urls)),
]
