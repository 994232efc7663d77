# -*- coding: utf-8 -*-
"""
E2E тест жизненного цикла вопроса через API
"""

import json

import pytest

from tests.fixtures import TEST_TOKEN, question_payload

URL = "/api/questions"


class TestQuestionFlow:
    """Полный цикл: создание, чтение, обновление, статистика, удаление"""

    @pytest.mark.asyncio
    async def test_full_lifecycle(self, async_client):
        auth = {"token": TEST_TOKEN}
        payload = question_payload(pvt=True)

        # 1. Создаем приватный вопрос
        response = await async_client.post(URL, params=auth, json=payload)
        assert response.status_code == 200

        # 2. Без токена его не видно
        response = await async_client.get(URL)
        assert response.json() == []

        # 3. С токеном он в списке, ID назначен хранилищем
        response = await async_client.get(URL, params=auth)
        questions = response.json()
        assert len(questions) == 1
        question_id = questions[0]["id"]
        assert question_id

        # 4. Содержимое совпадает с отправленным, кроме ID
        response = await async_client.get(URL, params={"id": question_id, **auth})
        assert response.status_code == 200
        created = response.json()
        assert created.pop("id") == question_id
        assert created == payload

        # 5. Полная замена: вопрос становится публичным
        replacement = question_payload(
            id=question_id,
            description="Merge sort",
            record={"2020/1": {"alice": 100.0}, "2020/2": {"bob": 50.0}},
            pvt=False,
        )
        response = await async_client.post(URL, params=auth, json=replacement)
        assert response.status_code == 200

        response = await async_client.get(URL, params={"id": question_id})
        assert response.status_code == 200
        assert response.json()["description"] == "Merge sort"

        # 6. Статистика пересчитана по новому record
        response = await async_client.get(
            f"{URL}/statistics", params={"id": question_id}
        )
        assert response.status_code == 200
        statistics = response.json()
        assert statistics["count"] == 2
        assert statistics["average"] == pytest.approx(75.0)
        assert statistics["semesters"] == {"2020/1": 100.0, "2020/2": 50.0}

        # 7. Удаляем
        response = await async_client.delete(URL, params={"id": question_id, **auth})
        assert response.status_code == 200

        response = await async_client.get(URL, params={"id": question_id, **auth})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_delete_all_after_bulk_create(self, async_client, serializer):
        auth = {"token": TEST_TOKEN}
        themes = ["Algorithms", "Graphs", "Databases", "Networks"]

        for index, theme in enumerate(themes):
            body = json.dumps(question_payload(theme=theme, pvt=index % 2 == 0))
            response = await async_client.post(
                URL,
                params=auth,
                content=body,
                headers={"content-type": "application/json"},
            )
            assert response.status_code == 200

        response = await async_client.get(URL)
        assert sorted(q["theme"] for q in response.json()) == ["Graphs", "Networks"]

        response = await async_client.delete(f"{URL}/deleteAll", params=auth)
        assert response.status_code == 200

        response = await async_client.get(URL, params=auth)
        assert response.json() == []

        # Повторное удаление пустого хранилища сообщает об ошибке
        response = await async_client.delete(f"{URL}/deleteAll", params=auth)
        assert response.status_code == 400
        assert response.text == serializer.render({"status": "ok"})
