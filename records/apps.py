from django.apps import AppConfig
from django.db.models.signals import post_migrate


class RecordsConfig(AppConfig):
    name = 'records'
    verbose_name = 'GBV records'
    default_auto_field = 'django.db.models.BigAutoField'

    def ready(self) -> None:
        from django.conf import settings

        if getattr(settings, 'SEED_ON_MIGRATE', False):
            from .services.seed import seed_after_migrate

            post_migrate.connect(seed_after_migrate, sender=self)
