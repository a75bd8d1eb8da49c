from .base_repository import BaseRepository
from .director_repository import DirectorRepository
from .movie_repository import MovieRepository

__all__ = [
    "BaseRepository",
    "DirectorRepository",
    "MovieRepository"
]
