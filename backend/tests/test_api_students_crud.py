"""
Tests d'intégration API pour les écritures sur les élèves.
POST   /api/students       — création
PUT    /api/students/{id}  — remplacement complet
DELETE /api/students/{id}  — suppression
"""

from sqlalchemy.exc import SQLAlchemyError


ANA = {"name": "Ana", "age": 20, "semestre": "2024-1"}


# ============================================================
# POST /api/students
# ============================================================

def test_create_student_succes(client, mock_db):
    """Création valide → 200 avec l'id attribué par la base."""
    mock_db.execute.return_value.scalar_one.return_value = 7

    response = client.post("/api/students", json=ANA)

    assert response.status_code == 200
    assert response.json() == {**ANA, "id": 7, "last_name": None}
    mock_db.commit.assert_called_once()


def test_create_student_avec_last_name(client, mock_db):
    mock_db.execute.return_value.scalar_one.return_value = 8

    response = client.post("/api/students", json={**ANA, "last_name": "Pérez"})

    assert response.status_code == 200
    assert response.json()["last_name"] == "Pérez"


def test_create_student_age_en_chaine_coerce(client, mock_db):
    mock_db.execute.return_value.scalar_one.return_value = 9

    response = client.post("/api/students", json={**ANA, "age": "20"})

    assert response.status_code == 200
    assert response.json()["age"] == 20


def test_create_student_champ_manquant(client, mock_db):
    """Champ obligatoire absent → 400, aucune insertion."""
    response = client.post("/api/students", json={"name": "Ana"})

    assert response.status_code == 400
    assert "error" in response.json()
    mock_db.execute.assert_not_called()


def test_create_student_body_vide(client, mock_db):
    response = client.post("/api/students", json={})
    assert response.status_code == 400
    mock_db.execute.assert_not_called()


def test_create_student_json_mal_forme(client, mock_db):
    response = client.post(
        "/api/students",
        content="{pas du json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert "error" in response.json()
    mock_db.execute.assert_not_called()


def test_create_student_erreur_base(client, mock_db):
    mock_db.execute.side_effect = SQLAlchemyError("insert refusé")

    response = client.post("/api/students", json=ANA)

    assert response.status_code == 500
    assert response.json() == {"error": "Erreur lors de la création de l'élève."}
    mock_db.rollback.assert_called_once()


# ============================================================
# PUT /api/students/{id}
# ============================================================

def test_update_student_succes(client, mock_db):
    """L'id du chemin remplace celui du body."""
    response = client.put("/api/students/5", json={**ANA, "id": 99, "last_name": "Gómez"})

    assert response.status_code == 200
    assert response.json() == {**ANA, "id": 5, "last_name": "Gómez"}
    mock_db.execute.assert_called_once()
    mock_db.commit.assert_called_once()


def test_update_student_id_inexistant_retourne_200(client, mock_db):
    mock_db.execute.return_value.rowcount = 0

    response = client.put("/api/students/1234", json=ANA)

    assert response.status_code == 200
    assert response.json()["id"] == 1234


def test_update_student_id_non_numerique(client, mock_db):
    response = client.put("/api/students/abc", json=ANA)

    assert response.status_code == 400
    mock_db.execute.assert_not_called()


def test_update_student_body_incomplet(client, mock_db):
    """PUT remplace tous les champs : un body partiel est rejeté."""
    response = client.put("/api/students/5", json={"name": "Ana"})

    assert response.status_code == 400
    mock_db.execute.assert_not_called()


def test_update_student_erreur_base(client, mock_db):
    mock_db.execute.side_effect = SQLAlchemyError("timeout")

    response = client.put("/api/students/5", json=ANA)

    assert response.status_code == 500
    assert response.json() == {"error": "Erreur lors de la mise à jour de l'élève."}


# ============================================================
# DELETE /api/students/{id}
# ============================================================

def test_delete_student_succes(client, mock_db):
    """Suppression d'un élève existant → 204 sans body."""
    mock_db.execute.return_value.rowcount = 1

    response = client.delete("/api/students/5")

    assert response.status_code == 204
    assert response.content == b""
    mock_db.commit.assert_called_once()


def test_delete_student_introuvable_retourne_500(client, mock_db):
    """Aucune ligne supprimée : signalé comme une erreur serveur."""
    mock_db.execute.return_value.rowcount = 0

    response = client.delete("/api/students/5")

    assert response.status_code == 500
    assert response.json() == {"error": "Erreur lors de la suppression de l'élève."}


def test_delete_student_erreur_base(client, mock_db):
    mock_db.execute.side_effect = SQLAlchemyError("verrou")

    response = client.delete("/api/students/5")

    assert response.status_code == 500
    mock_db.rollback.assert_called_once()


def test_delete_student_id_non_numerique(client, mock_db):
    response = client.delete("/api/students/abc")

    assert response.status_code == 400
    mock_db.execute.assert_not_called()
