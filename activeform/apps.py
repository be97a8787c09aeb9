from django.apps import AppConfig


class ActiveformConfig(AppConfig):
    name = "activeform"
    verbose_name = "Bootstrap active forms"

    def ready(self):
        from .conf import check_settings

        check_settings()
