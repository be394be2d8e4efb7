from django.apps import AppConfig


class MentorbookingConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "mentorbooking"

    def ready(self) -> None:
        from mentorbooking import signals  # noqa: F401
