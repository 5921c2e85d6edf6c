"""SkillHub: user accounts and personal skill tracking over a REST API."""

__version__ = "0.1.0"
