"""
URL mappings for the ``/api`` prefix.

Every record type gets the same four routes: ``<plural>`` (paginated
list), ``<plural>/search`` (filtered list), ``<singular>`` (create) and
``<singular>/<id>`` (get, update, delete).  Trailing slashes are not
appended, except that create also answers on ``<singular>/``.
"""
from django.urls import path

from .auth_views import login_view, logout_view, me_view, refresh_view
from .views.base import ResourceViews
from .views.cases import case_views, charge_views, witness_views
from .views.medical import examination_views, facility_views, practitioner_views
from .views.police import officer_views, post_views, role_views
from .views.suspects import arrest_views, suspect_views
from .views.toxicology import report_views, summary_views, symptom_views
from .views.victims import victim_views


def resource_urls(views: ResourceViews, singular: str, plural: str) -> list:
    return [
        path(plural, views.list, name=f'{singular}-list'),
        path(f'{plural}/search', views.search, name=f'{singular}-search'),
        path(singular, views.create, name=f'{singular}-create'),
        path(f'{singular}/', views.create),
        path(f'{singular}/<str:pk>', views.detail, name=f'{singular}-detail'),
    ]


urlpatterns = [
    path('login', login_view, name='login_view'),
    path('refresh-token', refresh_view, name='refresh_view'),
    path('logout', logout_view, name='logout_view'),
    path('me', me_view, name='me_view'),
    *resource_urls(victim_views, 'victim', 'victims'),
    *resource_urls(suspect_views, 'suspect', 'suspects'),
    *resource_urls(arrest_views, 'arrest', 'arrests'),
    *resource_urls(case_views, 'case', 'cases'),
    *resource_urls(charge_views, 'charge', 'charges'),
    *resource_urls(witness_views, 'witness', 'witnesses'),
    *resource_urls(post_views, 'police-post', 'police-posts'),
    *resource_urls(officer_views, 'police-officer', 'police-officers'),
    *resource_urls(role_views, 'police-role', 'police-roles'),
    *resource_urls(facility_views, 'health-facility', 'health-facilities'),
    *resource_urls(practitioner_views, 'health-practitioner', 'health-practitioners'),
    *resource_urls(examination_views, 'examination', 'examinations'),
    *resource_urls(report_views, 'toxicology-report', 'toxicology-reports'),
    *resource_urls(symptom_views, 'symptom', 'symptoms'),
    *resource_urls(summary_views, 'post-mortem-summary', 'post-mortem-summaries'),
]
