"""Infrastructure modules for the alert language engine.

Centralized infrastructure components:
- configuration: Settings management (Settings, LanguageFeatureSettings)
- logging: Structured logging setup (configure_logging, get_module_logger)
- i18n: Supported languages and locale token mapping
- services: Dependency injection providers (get_settings)
"""
