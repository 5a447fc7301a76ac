"""
Infrastructure layer for the agency back-office.

This layer contains the implementation details for external systems integration:
- Backing stores (in-memory arena, SQLAlchemy)
- Row mappers for the project aggregate
- Email delivery
- HTTP routers

The infrastructure layer implements interfaces defined in the domain layer.
"""
