import logging
from typing import List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from movies_api.core.exceptions import DataAccessException, MovieNotFoundException
from movies_api.models.movie import Movie
from movies_api.repositories.director_repository import DirectorRepository
from movies_api.repositories.movie_repository import MovieRepository
from movies_api.schemas.movie import DirectorIn, MovieCreate, MovieUpdate

logger = logging.getLogger(__name__)

# movies.id is a 32-bit INTEGER column
MAX_MOVIE_ID = 2**31 - 1

def parse_movie_id(raw_id: str) -> Optional[int]:
    """Turn a path parameter into a movie ID; None if no row could ever match"""
    if not raw_id.isascii() or not raw_id.isdigit():
        return None
    movie_id = int(raw_id)
    if movie_id < 1 or movie_id > MAX_MOVIE_ID:
        return None
    return movie_id

class MovieService:
    """Movie CRUD; each write runs in a single transaction"""

    def __init__(self, db: Session):
        self.db = db
        self.movie_repository = MovieRepository(db)
        self.director_repository = DirectorRepository(db)

    def list_movies(self) -> List[Movie]:
        try:
            movies = self.movie_repository.get_all()
            logger.info(f"Movie list requested, {len(movies)} entries found")
            return movies
        except SQLAlchemyError as e:
            logger.error(f"Error fetching movies: {str(e)}")
            raise DataAccessException("Unable to fetch movies") from e

    def get_movie(self, raw_id: str) -> Movie:
        movie_id = parse_movie_id(raw_id)
        if movie_id is None:
            raise MovieNotFoundException()
        try:
            movie = self.movie_repository.get(movie_id)
        except SQLAlchemyError as e:
            logger.error(f"Error fetching movie {movie_id}: {str(e)}")
            raise DataAccessException("Error fetching movie") from e
        if not movie:
            raise MovieNotFoundException()
        return movie

    def create_movie(self, movie_data: MovieCreate) -> Movie:
        try:
            director_id = self._resolve_director(movie_data.director)
            movie = self.movie_repository.create_movie(
                title=movie_data.title,
                description=movie_data.description,
                release_year=movie_data.release_year,
                poster=movie_data.poster,
                director_id=director_id
            )
            movie_id = movie.id
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error creating movie: {str(e)}")
            raise DataAccessException("Failed to create movie") from e

        logger.info(f"Movie created with ID {movie_id}: {movie_data.title}")
        return self.get_movie(str(movie_id))

    def update_movie(self, raw_id: str, movie_data: MovieUpdate) -> Movie:
        movie_id = parse_movie_id(raw_id)
        if movie_id is None:
            raise MovieNotFoundException()
        try:
            director_id = self._resolve_director(movie_data.director)
            updated = self.movie_repository.update_movie(
                movie_id,
                title=movie_data.title,
                description=movie_data.description,
                release_year=movie_data.release_year,
                poster=movie_data.poster,
                director_id=director_id
            )
            if updated == 0:
                # Keep a director created for a missing movie out of the table
                self.db.rollback()
                logger.warning(f"Attempt to update a non-existent movie ID {movie_id}")
                raise MovieNotFoundException()
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error updating movie {movie_id}: {str(e)}")
            raise DataAccessException("Failed to update movie") from e

        logger.info(f"Movie updated with ID {movie_id}: {movie_data.title}")
        return self.get_movie(str(movie_id))

    def delete_movie(self, raw_id: str) -> int:
        """Delete the movie row only; its director is kept"""
        movie_id = parse_movie_id(raw_id)
        if movie_id is None:
            raise MovieNotFoundException()
        try:
            deleted = self.movie_repository.delete_by_id(movie_id)
            if deleted == 0:
                self.db.rollback()
                logger.warning(f"Attempt to delete a non-existent movie ID {movie_id}")
                raise MovieNotFoundException()
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error deleting movie {movie_id}: {str(e)}")
            raise DataAccessException("Failed to delete movie") from e

        logger.info(f"Movie deleted with ID {movie_id}")
        return movie_id

    def _resolve_director(self, director: Optional[DirectorIn]) -> Optional[int]:
        if director is None:
            return None
        return self.director_repository.get_or_create(director.first_name, director.last_name)
