from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'worklogs'

router = SimpleRouter(trailing_slash=False)
router.register(r'work-logs', views.WorkLogViewSet, basename='worklog')
router.register(r'persons', views.PersonViewSet, basename='person')
router.register(r'activities', views.ActivityViewSet, basename='activity')

urlpatterns = [
    # GET    /api/work-logs              - List work logs (personId, activityId, startDate, endDate)
    # POST   /api/work-logs              - Record a work log
    # GET    /api/work-logs/{id}         - Work log detail
    # GET    /api/work-logs/recent       - Most recent work logs
    # GET    /api/work-logs/summary      - Today / week / month totals
    # GET    /api/work-logs/charts       - Chart series
    # GET    /api/persons                - List persons
    # POST   /api/persons                - Create person
    # GET    /api/activities             - List activities
    # POST   /api/activities             - Create activity
    path('', include(router.urls)),
]
