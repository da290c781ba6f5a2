"""
Companies app URLs
"""
from django.urls import path
from .views import CompanyDetailView, CompanyListCreateView, VerifiedCompanyListView

urlpatterns = [
    path('', CompanyListCreateView.as_view(), name='company-list'),
    path('verified/', VerifiedCompanyListView.as_view(), name='company-verified'),
    path('<uuid:pk>/', CompanyDetailView.as_view(), name='company-detail'),
]
