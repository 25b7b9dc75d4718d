"""Cross-cutting concerns: exceptions, logging, security, middleware and the application context."""
