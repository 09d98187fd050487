"""
DOMAIN LAYER - Chats, memberships, roles, messages and tasks

This layer contains:
- Entities: Business objects with identity (Chat, ChatMember, Message, Task)
- Value Objects: Immutable types (UserId, ChatId, MessageId, SystemRole)
- Ports: Interfaces that infrastructure implements (repositories, gateways)
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no FastAPI, SQLAlchemy, Pydantic, etc.)
2. NO I/O operations (no database, no HTTP, no Kafka)
3. Only depends on Python stdlib
"""
