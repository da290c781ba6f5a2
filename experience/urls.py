"""
Experience app URLs
"""
from django.urls import path
from .views import ExperienceAddView, ExperienceDetailView, ExperienceView

urlpatterns = [
    path('', ExperienceView.as_view(), name='experience'),
    path('add/', ExperienceAddView.as_view(), name='experience-add'),
    path('<uuid:experience_id>/', ExperienceDetailView.as_view(), name='experience-detail'),
]
