"""Resume Insight - ATS resume scoring and AI-content detection."""

__version__ = "0.1.0"
