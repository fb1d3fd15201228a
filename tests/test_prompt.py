"""Tests for doublysure.prompt."""
import click
import pytest

from doublysure import ask, sure_deferred, sure_value
from doublysure.core.constants import DEFAULT_QUESTION


@pytest.fixture
def reply(monkeypatch):
    """Answer click.confirm with a canned reply and record the question."""
    asked = []

    def install(answer):
        def fake_confirm(text, default=False):
            asked.append(text)
            if isinstance(answer, BaseException):
                raise answer
            return answer
        monkeypatch.setattr(click, "confirm", fake_confirm)
        return asked

    return install


class TestAsk:
    """Tests for ask."""

    def test_yes_runs(self, reply, side_effects):
        """Answering yes confirms the gate."""
        reply(True)
        sure = sure_deferred(lambda: side_effects.append(5) or "done")
        assert ask(sure) == (True, "done")
        assert side_effects == [5]
        assert sure.resolved

    def test_no_declines(self, reply, side_effects):
        """Answering no declines and never runs."""
        reply(False)
        sure = sure_deferred(lambda: side_effects.append(5))
        assert ask(sure) == (False, None)
        assert side_effects == []
        assert sure.resolved

    def test_abort_declines(self, reply, side_effects):
        """An aborted prompt declines the gate and re-raises."""
        reply(click.Abort())
        sure = sure_deferred(lambda: side_effects.append(5))
        with pytest.raises(click.Abort):
            ask(sure)
        assert side_effects == []
        assert sure.resolved

    def test_assume_yes_skips_prompt(self, reply):
        """assume_yes confirms without asking."""
        asked = reply(False)
        assert ask(sure_value(8), assume_yes=True) == (True, 8)
        assert asked == []

    def test_question_from_label(self, reply):
        """The gate's label is shown in the default question."""
        asked = reply(False)
        ask(sure_value(1, label="drop users"))
        assert asked == [f"{DEFAULT_QUESTION} (drop users)"]

    def test_question_explicit(self, reply):
        """An explicit question wins over the label."""
        asked = reply(False)
        ask(sure_value(1, label="drop users"), question="Really?")
        assert asked == ["Really?"]

    def test_question_default(self, reply):
        """Without label or question the default question is used."""
        asked = reply(False)
        ask(sure_value(1))
        assert asked == [DEFAULT_QUESTION]
