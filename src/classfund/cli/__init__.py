"""Command-line interface for classfund."""
