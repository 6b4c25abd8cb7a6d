"""Case, charge and witness endpoints."""
from ..services.cases import cases, charges, witnesses
from .base import resource_views

case_views = resource_views(cases, singular='Case', plural='Cases')
charge_views = resource_views(charges, singular='Charge', plural='Charges')
witness_views = resource_views(witnesses, singular='Witness', plural='Witnesses')
