def test_create_subject_allows_duplicates(client, store) -> None:
    first = client.post("/subjects/Alchemy")
    second = client.post("/subjects/Alchemy")

    assert first.status_code == second.status_code == 200
    assert first.json()["result"]["insertedId"] != second.json()["result"]["insertedId"]
    assert [doc["subjectName"] for doc in store.collections["subjects"]] == ["Alchemy", "Alchemy"]


def test_list_subjects_returns_all(client) -> None:
    client.post("/subjects/Alchemy")
    client.post("/subjects/Potions")

    response = client.get("/subjects")

    subjects = response.json()["subjects"]
    assert [subject["subjectName"] for subject in subjects] == ["Alchemy", "Potions"]
    assert all(isinstance(subject["_id"], str) for subject in subjects)


def test_delete_subject_by_name(client, store) -> None:
    client.post("/subjects/Alchemy")
    client.post("/subjects/Potions")

    response = client.delete("/subjects/Alchemy")

    assert response.json() == {"message": "Deleted"}
    assert [doc["subjectName"] for doc in store.collections["subjects"]] == ["Potions"]
    assert store.calls[-1][0] == "delete_one"
    assert "_id" in store.calls[-1][2]


def test_delete_unknown_subject_is_not_an_error(client, store) -> None:
    response = client.delete("/subjects/Divination")

    assert response.status_code == 200
    assert response.json() == {"message": "Subject not found"}
    assert [call[0] for call in store.calls] == ["find_one"]


def test_subjects_are_independent_of_student_subjects(client, store) -> None:
    client.post("/students", json={"name": "Harry", "age": 11, "subjects": ["Alchemy"]})

    response = client.get("/subjects")

    assert response.json() == {"subjects": []}
