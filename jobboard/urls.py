"""
URL configuration for the jobboard project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/4.2/topics/http/urls/
"""
from django.contrib import admin
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from accounts.views import UserViewSet
from profiles.views import CandidateProfileViewSet
from jobs.views import JobPostingViewSet
from jobboard.views import database_health

# Create router and register viewsets
router = DefaultRouter()
router.register(r'users', UserViewSet, basename='user')
router.register(r'profiles', CandidateProfileViewSet, basename='profile')
router.register(r'jobs', JobPostingViewSet, basename='job')

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/health/db/', database_health, name='health-db'),
    path('api/companies/', include('companies.urls')),
    path('api/experience/', include('experience.urls')),
    path('api/', include(router.urls)),
    path('api-auth/', include('rest_framework.urls')),
]
