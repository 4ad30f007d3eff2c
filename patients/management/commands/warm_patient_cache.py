from django.conf import settings
from django.core.cache import cache
from django.core.management.base import BaseCommand
from django.utils import timezone

from patients.services.queries import PATIENT_LIST_CACHE_KEY, load_patients


class Command(BaseCommand):
    help = "Rebuild the cached patient list from the database."

    def handle(self, *args, **options):
        now = timezone.now()
        patients = load_patients()
        cache.set(PATIENT_LIST_CACHE_KEY, patients, settings.PATIENT_LIST_CACHE_TTL)
        self.stdout.write(self.style.SUCCESS(
            f"Cached {len(patients)} patients under {PATIENT_LIST_CACHE_KEY} at {now}"
        ))
