from movies_api.db import Base
from .director import Director
from .movie import Movie

__all__ = ['Base', 'Director', 'Movie']
