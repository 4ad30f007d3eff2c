from django.conf import settings
from rest_framework.throttling import AnonRateThrottle


class BurstRateThrottle(AnonRateThrottle):
    """Per client IP request limit shared by every API view.

    The rate is read from ``settings.API_BURST_RATE`` on each request so it
    can be tuned (or switched off with ``None``) without re-importing DRF.
    """
    scope = 'burst'

    def get_rate(self):
        return getattr(settings, 'API_BURST_RATE', None)

    def get_cache_key(self, request, view):
        return self.cache_format % {
            'scope': self.scope,
            'ident': self.get_ident(request),
        }
