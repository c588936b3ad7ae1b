"""Tests for the typer CLI."""

from datetime import datetime, timedelta, timezone

import pytest
from typer.testing import CliRunner

import cli
from studylist.study_list import StudyList

runner = CliRunner()


@pytest.fixture(autouse=True)
def use_test_database(monkeypatch, store, scheduler):
    monkeypatch.setattr(cli, "get_study_list", lambda: StudyList(store, scheduler=scheduler).load())


def seed(store, scheduler, *texts):
    study_list = StudyList(store, scheduler=scheduler)
    return [study_list.add(text) for text in texts]


def test_add_command_persists_item(store):
    result = runner.invoke(cli.app, ["add", "Cell biology"])

    assert result.exit_code == 0
    assert "Added: Cell biology" in result.output
    assert [item.text for item in store.load()] == ["Cell biology"]


def test_add_blank_text_creates_nothing(store):
    result = runner.invoke(cli.app, ["add", "   "])

    assert result.exit_code == 0
    assert "Nothing to add" in result.output
    assert store.load() == []


def test_today_lists_newest_first(store, scheduler):
    seed(store, scheduler, "Algebra", "Biology")

    result = runner.invoke(cli.app, ["today"])

    assert result.exit_code == 0
    assert result.output.index("Biology") < result.output.index("Algebra")


def test_complete_moves_item_to_completed_and_to_revise(store, scheduler):
    item, = seed(store, scheduler, "Algebra")

    result = runner.invoke(cli.app, ["complete", item.id])
    assert result.exit_code == 0
    assert "Completed: Algebra" in result.output

    completed = runner.invoke(cli.app, ["completed"])
    assert "Algebra (Revised 1 times)" in completed.output
    assert "- Completed" in completed.output

    due = runner.invoke(cli.app, ["to-revise"])
    assert "What to revise today" in due.output
    assert item.id in due.output


def test_revise_reports_next_review(store, scheduler):
    item, = seed(store, scheduler, "Algebra")
    runner.invoke(cli.app, ["complete", item.id])

    before = datetime.now(timezone.utc)
    result = runner.invoke(cli.app, ["revise", item.id])
    after = datetime.now(timezone.utc)

    assert result.exit_code == 0
    assert "Revised 2 times" in result.output
    candidates = {
        (moment + timedelta(days=2)).astimezone().strftime("%Y-%m-%d")
        for moment in (before, after)
    }
    assert any(f"Next review: {day}" in result.output for day in candidates)


def test_revise_uncompleted_item_fails(store, scheduler):
    item, = seed(store, scheduler, "Algebra")

    result = runner.invoke(cli.app, ["revise", item.id])

    assert result.exit_code == 1
    assert "not been completed" in result.output


def test_unknown_item_fails():
    result = runner.invoke(cli.app, ["complete", "nope"])

    assert result.exit_code == 1
    assert "not found" in result.output


def test_history_lists_entries(store, scheduler):
    item, = seed(store, scheduler, "Algebra")
    runner.invoke(cli.app, ["complete", item.id])
    runner.invoke(cli.app, ["revise", item.id])

    result = runner.invoke(cli.app, ["history", item.id])

    assert result.exit_code == 0
    assert "(Revised 2 times)" in result.output
    assert result.output.index("- Completed") < result.output.index("- Revised")


def test_clear_requires_confirmation(store, scheduler):
    seed(store, scheduler, "Algebra")

    cancelled = runner.invoke(cli.app, ["clear"], input="n\n")
    assert "Cancelled" in cancelled.output
    assert len(store.load()) == 1

    result = runner.invoke(cli.app, ["clear", "--yes"])
    assert result.exit_code == 0
    assert store.load() == []

    empty = runner.invoke(cli.app, ["today"])
    assert "Nothing left to study today" in empty.output
