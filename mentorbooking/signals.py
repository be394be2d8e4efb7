"""Django signals for cache invalidation.

Invalidation waits for the surrounding transaction to commit so a
concurrent read cannot re-cache the pre-commit rows.
"""

from functools import partial

from django.db import transaction
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from mentorbooking.cache import invalidate_event
from mentorbooking.models import Event


@receiver([post_save, post_delete], sender=Event)
def invalidate_event_cache(sender, instance, **kwargs):
    """Invalidate caches when an event is saved or deleted."""
    transaction.on_commit(partial(invalidate_event, str(instance.pk)))
