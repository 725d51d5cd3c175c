"""
Core infrastructure: database, exceptions, WebSocket notifications and
the application context.
"""
