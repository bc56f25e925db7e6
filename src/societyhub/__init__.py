"""SocietyHub - society role and privilege assignment engine."""

__version__ = "0.1.0"
