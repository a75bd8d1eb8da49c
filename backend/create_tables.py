import logging
from movies_api.core.config import get_settings
from movies_api.db import Base, create_db_engine
# Register all models on Base.metadata
from movies_api.models import *

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

def main():
    """Create the movies and directors tables"""
    engine = create_db_engine(get_settings())
    Base.metadata.create_all(bind=engine)
    logger.info("All tables created successfully.")

if __name__ == "__main__":
    main()
