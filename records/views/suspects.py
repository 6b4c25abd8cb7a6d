"""
Suspect and arrest endpoints.

Suspect create/update accept ``multipart/form-data`` so ``photo`` and
``fingerprints`` can be uploaded as files next to the text fields.
"""
from ..services.suspects import arrests, suspects
from .base import resource_views

suspect_views = resource_views(suspects, singular='Suspect', plural='Suspects')
arrest_views = resource_views(arrests, singular='Arrest', plural='Arrests')
