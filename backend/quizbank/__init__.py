"""Application package for the quiz bank backend.

This package exposes the model, repository, service and schema modules
used by the FastAPI application in `quizbank.main`.
"""
