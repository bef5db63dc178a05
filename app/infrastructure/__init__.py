"""
Infrastructure layer for the e-learning notification service.

This layer contains the implementation details for external systems integration:
- User profiles (Supabase / PostgREST)
- Email delivery (SMTP) and templates (Jinja2)
- Database webhooks (FastAPI)

The infrastructure layer implements interfaces defined in the domain layer,
following the Dependency Inversion Principle of Clean Architecture.
"""
