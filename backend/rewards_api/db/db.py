from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from rewards_api.config import AppConfig

engine = create_engine(AppConfig.DATABASE_URL, connect_args=AppConfig.connect_args())

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()
