"""
URL mappings for the clinic API and the browser client.

API paths carry no trailing slash to match the client's requests.
"""
from django.urls import path, include

from .auth_views import login_view, logout_view, refresh_view, register_view
from .views import health
from .views.patients import patient_detail, patient_list
from .views.spa import index


urlpatterns = [
    path('', index, name='index'),
    path('healthz', health.healthz, name='healthz'),
    path('', include('django_prometheus.urls')),
    # Authentication
    path('api/auth/register', register_view, name='register_view'),
    path('api/auth/login', login_view, name='login_view'),
    path('api/auth/refresh', refresh_view, name='refresh_view'),
    path('api/auth/logout', logout_view, name='logout_view'),
    # Patients
    path('api/patients', patient_list, name='patient_list'),
    path('api/patients/<int:pk>', patient_detail, name='patient_detail'),
]
