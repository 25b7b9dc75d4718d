"""Village citizen-feedback backend: complaints, announcements and admin auth."""

__version__ = "1.0.0"
