"""
FastAPI dependencies.

Provides the shared question catalog and the progress store to routes.
"""

from functools import partial

from fastapi import Depends, Request

from sixfactors.config import Settings, get_settings
from sixfactors.db.mongodb import get_collection
from sixfactors.question_service.catalog import QuestionCatalog
from sixfactors.repositories.progress_repository import ProgressStore


def get_catalog(request: Request) -> QuestionCatalog:
    """Return the catalog built during application startup."""
    return request.app.state.catalog


def get_progress_store(
    settings: Settings = Depends(get_settings),
) -> ProgressStore:
    """Return a progress store bound to the answers collection."""
    return ProgressStore(partial(get_collection, settings.ANSWERS_COLLECTION))
