"""Health facility, practitioner and examination endpoints."""
from ..services.medical import examinations, facilities, practitioners
from .base import resource_views

facility_views = resource_views(facilities, singular='Health facility', plural='Health facilities')
practitioner_views = resource_views(practitioners, singular='Health practitioner', plural='Health practitioners')
examination_views = resource_views(examinations, singular='Examination', plural='Examinations')
