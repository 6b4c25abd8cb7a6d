"""
Reference data inserted on a fresh database.

Each table is seeded only while it is empty, so running the seed again
(or on every deploy) never duplicates or overwrites rows.
"""
from __future__ import annotations

import logging

from django.conf import settings
from django.db import transaction

from ..models import PoliceOfficer, PolicePost, PoliceRole

logger = logging.getLogger(__name__)

ROLES = ['Admin', 'Station Manager', 'User']

POSTS = [
    {'name': 'Kampala Central Police Head quarters', 'location': 'Kampala Main Street', 'contact': '+25641000789'},
    {'name': 'Wandegeya Police Post', 'location': 'Wandegeya', 'contact': '+25641000788'},
]

ADMIN_OFFICER = {
    'first_name': 'John',
    'last_name': 'Doe',
    'rank': 'ASP',
    'badge_no': 'B00192',
    'username': 'Admin',
    'email': 'admin@example.com',
    'phone': '07812663647',
}


def seed_roles() -> int:
    if PoliceRole.objects.exists():
        logger.info("roles already present, skipping seed")
        return 0
    PoliceRole.objects.bulk_create(PoliceRole(name=name) for name in ROLES)
    logger.info("seeded %d roles", len(ROLES))
    return len(ROLES)


def seed_posts() -> int:
    if PolicePost.objects.exists():
        logger.info("police posts already present, skipping seed")
        return 0
    PolicePost.objects.bulk_create(PolicePost(**p) for p in POSTS)
    logger.info("seeded %d police posts", len(POSTS))
    return len(POSTS)


def seed_officers(password: str | None = None) -> int:
    if PoliceOfficer.objects.exists():
        logger.info("police officers already present, skipping seed")
        return 0
    officer = PoliceOfficer.objects.create_user(
        password=password or settings.SEED_ADMIN_PASSWORD,
        post=PolicePost.objects.order_by('id').first(),
        **ADMIN_OFFICER,
    )
    officer.roles.set(PoliceRole.objects.filter(name='Admin'))
    logger.info("seeded admin officer %s", officer.username)
    return 1


@transaction.atomic
def seed_all(password: str | None = None) -> dict[str, int]:
    return {
        'roles': seed_roles(),
        'posts': seed_posts(),
        'officers': seed_officers(password),
    }


def seed_after_migrate(sender, **kwargs) -> None:
    """``post_migrate`` receiver enabled by ``SEED_ON_MIGRATE``."""
    seed_all()
