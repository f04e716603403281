"""
Presentation Layer - HTTP surface of the booking backend.

Routers stay thin: they resolve the session, call a repository or command
handler and shape the response. Access control runs as a dependency.
"""
