from django.apps import AppConfig


class ProgramYearsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'program_years'
    verbose_name = 'Program Years'
