from typing import Optional
from sqlalchemy.orm import Session
from movies_api.repositories.base_repository import BaseRepository
from movies_api.models.movie import Movie

class MovieRepository(BaseRepository[Movie]):
    """Movie repository; directors are loaded with a left outer join"""

    def __init__(self, db: Session):
        super().__init__(Movie, db)

    def create_movie(self, title: str, description: str, release_year: int, poster: str, director_id: Optional[int]) -> Movie:
        return self.create({
            "title": title,
            "description": description,
            "release_year": release_year,
            "poster": poster,
            "director_id": director_id,
        })

    def update_movie(self, movie_id: int, title: str, description: str, release_year: int, poster: str, director_id: Optional[int]) -> int:
        return self.update_by_id(movie_id, {
            "title": title,
            "description": description,
            "release_year": release_year,
            "poster": poster,
            "director_id": director_id,
        })
