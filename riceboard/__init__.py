"""RICE feature prioritization: scoring, ranking and CSV/JSON interchange."""
