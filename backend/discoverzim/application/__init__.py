"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → Multi-step write workflows (booking a stay, chatting)
- dto/       → Typed records mirroring remote rows, plus write payloads
- common/    → Shared interfaces (Command, Query base classes)

Rules:
- Depends on Domain layer and persistence repositories only
- No HTTP/framework code here
"""
