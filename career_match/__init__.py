"""Career Match: rank careers against a user's skills, education, experience and interests."""

__version__ = "0.1.0"
