from sqlalchemy import Column, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship
from movies_api.db import Base

class Director(Base):
    __tablename__ = "directors"
    __table_args__ = (
        UniqueConstraint("first_name", "last_name", name="uq_directors_first_name_last_name"),
    )
    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)

    # Directors are shared and outlive their movies
    movies = relationship("Movie", back_populates="director")
