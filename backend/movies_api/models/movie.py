from sqlalchemy import Column, Integer, SmallInteger, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from movies_api.db import Base

class Movie(Base):
    __tablename__ = "movies"
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="")
    release_year = Column(SmallInteger, nullable=False)
    poster = Column(String, nullable=False, default="")
    director_id = Column(Integer, ForeignKey("directors.id"), nullable=True, index=True)

    director = relationship("Director", back_populates="movies", lazy="joined")
