# -*- coding: utf-8 -*-
"""
Unit тесты JSON сериализатора
"""

import json
from typing import List

import pytest

from reprova.domain.question import Question
from reprova.utils.exceptions import SerializationError
from reprova.utils.json_serializer import JsonSerializer
from tests.fixtures import question_payload


class TestJsonSerializer:
    """Тесты JsonSerializer"""

    def setup_method(self):
        self.serializer = JsonSerializer()

    def test_render_question(self):
        question = Question.model_validate(question_payload(id="abc"))

        data = json.loads(self.serializer.render(question))

        assert data["id"] == "abc"
        assert data["difficulty"] == "medium"
        assert data["record"] == {"2019/1": {"alice": 80.0, "bob": 60.0}}
        assert "statistics" not in data

    def test_render_list(self):
        questions = [
            Question.model_validate(question_payload(id="1")),
            Question.model_validate(question_payload(id="2")),
        ]

        data = json.loads(self.serializer.render(questions))

        assert [item["id"] for item in data] == ["1", "2"]

    def test_render_keeps_unicode(self):
        rendered = self.serializer.render({"status": "готово"})

        assert "готово" in rendered

    def test_parse_question(self):
        text = json.dumps(question_payload())

        question = self.serializer.parse(text, Question)

        assert isinstance(question, Question)
        assert question.description == "Sorting"

    def test_parse_bytes(self):
        question = self.serializer.parse(json.dumps(question_payload()).encode(), Question)

        assert question.theme == "Algorithms"

    def test_parse_list(self):
        text = json.dumps([question_payload(), question_payload(theme="Graphs")])

        questions = self.serializer.parse(text, List[Question])

        assert [q.theme for q in questions] == ["Algorithms", "Graphs"]

    @pytest.mark.parametrize("text", ["", "not json", "{", "[]", '{"theme": "x"}'])
    def test_parse_invalid(self, text):
        with pytest.raises(SerializationError):
            self.serializer.parse(text, Question)
