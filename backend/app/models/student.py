"""
Modèle SQLAlchemy pour la table students.
La table existe déjà côté base : clé primaire id_student, colonne semestre.
"""

from sqlalchemy import Column, Integer, String

from app.database import Base


class Student(Base):
    __tablename__ = "students"

    id = Column("id_student", Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    last_name = Column(String, nullable=True)
    age = Column(Integer)
    semestre = Column(String)
