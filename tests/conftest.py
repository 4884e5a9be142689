import os

import django

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "rail_fields.conf.test_settings")
django.setup()
