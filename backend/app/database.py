"""
Configuration de la connexion à la base de données PostgreSQL.
Un seul moteur SQLAlchemy partagé, une session par requête.
"""

import logging

from sqlalchemy import create_engine, text
from sqlalchemy.orm import declarative_base
from sqlalchemy.orm import sessionmaker

from app.config import settings

logger = logging.getLogger(__name__)

# Une URL mal formée lève ici, à l'import : le processus ne démarre pas.
engine = create_engine(settings.DATABASE_URL, pool_pre_ping=True)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Dépendance FastAPI — fournit une session BDD et la ferme après usage."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def check_database_connection() -> None:
    """
    Vérifie au démarrage que la base répond (SELECT 1).
    Aucune exception n'est interceptée : une base injoignable arrête le processus.
    """
    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))
    logger.info("Connexion à la base de données établie.")
