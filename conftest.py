import django
from django.conf import settings


def pytest_configure():
    settings.configure(
        SECRET_KEY="activeform-tests",
        INSTALLED_APPS=["activeform"],
        TEMPLATES=[{"BACKEND": "django.template.backends.django.DjangoTemplates", "APP_DIRS": True}],
        USE_I18N=True,
        LANGUAGE_CODE="en-us",
    )
    django.setup()
