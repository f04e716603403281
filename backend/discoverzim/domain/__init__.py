"""
DOMAIN LAYER - Session, navigation and workflow rules

This layer contains:
- Entities: Session state and the authenticated user
- Ports: Interfaces the infrastructure implements (notifier, edge functions)
- Services: Pure domain logic (route guard, process tracker)
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no FastAPI, Supabase, Pydantic, etc.)
2. NO I/O operations (no database, no HTTP, no file system)
3. Only depends on Python stdlib
"""
