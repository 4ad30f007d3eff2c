from django.conf import settings
from django.core.management.base import BaseCommand

from patients.models import User


class Command(BaseCommand):
    help = "Ensure the default admin account exists (idempotent)."

    def add_arguments(self, parser):
        parser.add_argument('--username', default=settings.DEFAULT_ADMIN_USERNAME)
        parser.add_argument('--password', default=settings.DEFAULT_ADMIN_PASSWORD)
        parser.add_argument(
            '--reset-password', action='store_true',
            help="Overwrite the password of an existing account.",
        )

    def handle(self, *args, **opts):
        username = opts['username']
        user = User.objects.filter(username=username).first()
        if user is None:
            User.objects.create_user(username=username, password=opts['password'], role=User.ROLE_ADMIN)
            self.stdout.write(self.style.SUCCESS(f"Default admin user created: {username}"))
            return
        if user.role != User.ROLE_ADMIN or opts['reset_password']:
            user.role = User.ROLE_ADMIN
            if opts['reset_password']:
                user.set_password(opts['password'])
            user.save()
        self.stdout.write(self.style.SUCCESS(f"ok: {username} ({user.role})"))
