import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List

from movies_api.db import get_db
from movies_api.core.exceptions import BaseAppException
from movies_api.services.movie_service import MovieService
from movies_api.schemas.movie import MovieCreate, MovieUpdate, MovieResponse, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/movies", tags=["movies"])

def handle_exception(e: Exception) -> HTTPException:
    """Handle exceptions and convert to HTTPException"""
    if isinstance(e, BaseAppException):
        return HTTPException(
            status_code=e.status_code,
            detail=e.message
        )
    else:
        logger.exception(f"Unhandled error: {str(e)}")
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An internal server error occurred"
        )

@router.get("", response_model=List[MovieResponse])
def list_movies(db: Session = Depends(get_db)):
    """List all movies with their directors"""
    try:
        movie_service = MovieService(db)
        return movie_service.list_movies()
    except Exception as e:
        raise handle_exception(e)

@router.get("/{movie_id}", response_model=MovieResponse,
            responses={404: {"description": "Movie not found"}})
def get_movie(movie_id: str, db: Session = Depends(get_db)):
    try:
        movie_service = MovieService(db)
        return movie_service.get_movie(movie_id)
    except Exception as e:
        raise handle_exception(e)

@router.post("", response_model=MovieResponse, status_code=status.HTTP_201_CREATED,
             responses={400: {"description": "Invalid input"}})
def create_movie(movie_data: MovieCreate, db: Session = Depends(get_db)):
    """Create a movie, resolving its director by name"""
    try:
        movie_service = MovieService(db)
        return movie_service.create_movie(movie_data)
    except Exception as e:
        raise handle_exception(e)

@router.put("/{movie_id}", response_model=MovieResponse,
            responses={400: {"description": "Invalid input"}, 404: {"description": "Movie not found"}})
def update_movie(movie_id: str, movie_data: MovieUpdate, db: Session = Depends(get_db)):
    try:
        movie_service = MovieService(db)
        return movie_service.update_movie(movie_id, movie_data)
    except Exception as e:
        raise handle_exception(e)

@router.delete("/{movie_id}", response_model=MessageResponse,
               responses={404: {"description": "Movie not found"}})
def delete_movie(movie_id: str, db: Session = Depends(get_db)):
    try:
        movie_service = MovieService(db)
        deleted_id = movie_service.delete_movie(movie_id)
        return {"message": f"Movie with ID {deleted_id} successfully deleted"}
    except Exception as e:
        raise handle_exception(e)
