"""
Application infrastructure shared by every layer:
- config: environment settings
- database: engine, sessions and health
- exceptions / error_handlers: error hierarchy and the JSON error envelope
- dependencies / security: request-scoped wiring and authentication
"""
