"""Anticipation-based emotion system: value predictors, emotivectors, personalities and emotion selection."""

__version__ = "0.1.0"