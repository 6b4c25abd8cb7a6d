"""Victim endpoints."""
from ..services.victims import victims
from .base import resource_views

victim_views = resource_views(victims, singular='Victim', plural='Victims')
