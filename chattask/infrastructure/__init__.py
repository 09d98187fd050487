"""
INFRASTRUCTURE LAYER - Implementations of the domain ports.

- persistence: SQLAlchemy (asyncio) repositories and unit of work
- http_clients: httpx gateways to the user, file and chat services
- messaging: notification publishers (Kafka, logging)
"""
