# -*- coding: utf-8 -*-
"""
Unit тесты сборки QuestionsResource
"""

import pytest
from fastapi.routing import APIRoute

from reprova.api.v1.questions import QuestionsResource
from reprova.security.security import StaticTokenAuthorizer
from reprova.utils.json_serializer import JsonSerializer


class TestQuestionsResourceSetup:
    """Тесты конструктора и установки маршрутов"""

    def test_requires_serializer(self, store):
        with pytest.raises(ValueError, match="serializer"):
            QuestionsResource(serializer=None, store=store)

    def test_requires_store(self):
        with pytest.raises(ValueError, match="store"):
            QuestionsResource(serializer=JsonSerializer(), store=None)

    def test_default_authorizer_from_settings(self, store):
        resource = QuestionsResource(serializer=JsonSerializer(), store=store)

        assert isinstance(resource.authorizer, StaticTokenAuthorizer)

    def test_routes(self, store):
        resource = QuestionsResource(
            serializer=JsonSerializer(),
            store=store,
            authorizer=StaticTokenAuthorizer("secret"),
        )

        routes = {
            (route.path, method)
            for route in resource.router.routes
            if isinstance(route, APIRoute)
            for method in route.methods
        }

        assert routes == {
            ("/questions", "GET"),
            ("/questions/statistics", "GET"),
            ("/questions", "POST"),
            ("/questions", "DELETE"),
            ("/questions/deleteAll", "DELETE"),
        }
