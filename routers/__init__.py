from .colorExtract import router as colorExtract_router

__all__ = ["colorExtract_router"]
