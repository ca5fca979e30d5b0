"""Infrastructure modules for prchecklist.

Centralized infrastructure components:
- configuration: Settings management (Settings and per-concern sections)
- logging: Structured logging (get_module_logger, bind_request_context)
- operations: Operation results and error classification
- notifications: Webhook channels and the background delivery executor
- services: Dependency injection providers (get_settings, SettingsDep)
"""
