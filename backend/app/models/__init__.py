# Importe les modèles pour enregistrer leurs tables dans Base.metadata.

from app.models.student import Student  # noqa: F401
