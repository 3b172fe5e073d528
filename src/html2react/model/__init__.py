"""Data structures shared by the converter and its callers."""
