from django.urls import path
from . import views

app_name = 'exports'

urlpatterns = [
    path('export', views.github_export, name='github-export'),
]
