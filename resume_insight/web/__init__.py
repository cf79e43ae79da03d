"""HTTP surface for Resume Insight."""
