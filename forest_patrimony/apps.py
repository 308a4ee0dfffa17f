"""
Django app configuration for forest_patrimony.

This module configures:
- Django application registration for the patrimony models
- Import settings validation at startup
"""

import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class ForestPatrimonyConfig(AppConfig):
    """Django app configuration for the forest patrimony application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "forest_patrimony"
    verbose_name = "Forest Patrimony"
    label = "forest_patrimony"

    def ready(self):
        """Validate import settings once the app registry is loaded."""
        try:
            self._validate_import_settings()
        except Exception as e:
            logger.error(f"Error initializing forest_patrimony: {e}")
            if self._is_debug_mode():
                raise

    def _validate_import_settings(self):
        from .importing.config import get_import_settings, validate_import_settings

        problems = validate_import_settings(get_import_settings())
        for problem in problems:
            logger.warning("FOREST_PATRIMONY_IMPORT: %s", problem)
        if not problems:
            logger.debug("Import settings validation completed")

    def _is_debug_mode(self):
        """Check if we're in debug mode."""
        from django.conf import settings as django_settings

        return getattr(django_settings, "DEBUG", False)
