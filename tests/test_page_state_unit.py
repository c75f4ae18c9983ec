from __future__ import annotations

import logging

from taskflow_core.catalog import ProjectCatalog
from taskflow_core.models import ProjectDraft, ProjectItem
from taskflow_core.page_state import FilterDebouncer, ProjectsPageState
from taskflow_core.validation import TITLE_REQUIRED


def _catalog() -> ProjectCatalog:
    return ProjectCatalog(
        [
            ProjectItem(id="1", title="Alpha Beta"),
            ProjectItem(id="2", title="Gamma"),
        ],
        clock=lambda: 1000,
    )


def test_debouncer_waits_for_the_delay() -> None:
    debouncer = FilterDebouncer(0.25)
    debouncer.submit("rea", now=10.0)
    assert not debouncer.settle(now=10.1)
    assert debouncer.value == ""
    assert debouncer.pending
    assert debouncer.settle(now=10.25)
    assert debouncer.value == "rea"
    assert not debouncer.pending


def test_debouncer_restarts_the_delay_on_every_submit() -> None:
    debouncer = FilterDebouncer(0.25)
    debouncer.submit("r", now=0.0)
    debouncer.submit("re", now=0.2)
    assert not debouncer.settle(now=0.3)
    debouncer.submit("react", now=0.4)
    assert debouncer.settle(now=1.0)
    assert debouncer.value == "react"


def test_debounced_and_immediate_filtering_agree() -> None:
    catalog = _catalog()
    immediate = ProjectsPageState(debounce_seconds=0)
    delayed = ProjectsPageState(debounce_seconds=0.25)

    for i, text in enumerate(["g", "ga", "gam"]):
        immediate.set_filter_input(text, now=float(i))
        delayed.set_filter_input(text, now=i * 0.1)
    delayed.settle_filter(now=5.0)

    assert immediate.active_filter == delayed.active_filter == "gam"
    assert immediate.visible_projects(catalog) == delayed.visible_projects(catalog)
    assert [p.id for p in delayed.visible_projects(catalog)] == ["2"]


def test_settle_reports_no_change_for_the_same_value() -> None:
    debouncer = FilterDebouncer(0)
    debouncer.submit("x", now=0.0)
    assert debouncer.value == "x"
    debouncer.submit("x", now=1.0)
    assert not debouncer.settle(now=2.0)


def test_clear_filter_resets_input_and_active_filter() -> None:
    state = ProjectsPageState(debounce_seconds=0)
    state.set_filter_input("alpha", now=0.0)
    state.clear_filter()
    assert state.filter_input == ""
    assert state.active_filter == ""
    assert len(state.visible_projects(_catalog())) == 2


def test_toggle_filter() -> None:
    state = ProjectsPageState()
    assert state.toggle_filter() is True
    assert state.toggle_filter() is False


def test_submit_add_without_title_keeps_dialog_open() -> None:
    catalog = _catalog()
    state = ProjectsPageState()
    state.open_add()
    state.draft = ProjectDraft(description="missing title")

    assert state.submit_add(catalog) is None
    assert state.is_add_open
    assert state.form_error == TITLE_REQUIRED
    assert len(catalog) == 2


def test_submit_add_success_resets_and_closes() -> None:
    catalog = _catalog()
    state = ProjectsPageState()
    state.open_add()
    state.draft = ProjectDraft(title="Delta")

    item = state.submit_add(catalog)

    assert item is not None
    assert catalog.items[0] is item
    assert not state.is_add_open
    assert state.form_error is None
    assert state.draft == ProjectDraft()


def test_open_add_clears_previous_error_and_draft() -> None:
    state = ProjectsPageState()
    state.form_error = TITLE_REQUIRED
    state.draft = ProjectDraft(title="stale")
    state.open_add()
    assert state.form_error is None
    assert state.draft == ProjectDraft()
    assert state.is_add_open
    state.cancel_add()
    assert not state.is_add_open


def test_zero_delay_filter_logs_the_applied_query(caplog) -> None:
    state = ProjectsPageState(debounce_seconds=0)
    with caplog.at_level(logging.INFO, logger="taskflow_core.actions"):
        assert state.set_filter_input("gam", now=0.0)
    assert "filter_applied" in caplog.text
    assert "gam" in caplog.text


def test_delayed_filter_logs_once_when_settled(caplog) -> None:
    state = ProjectsPageState(debounce_seconds=0.25)
    with caplog.at_level(logging.INFO, logger="taskflow_core.actions"):
        assert not state.set_filter_input("gam", now=0.0)
        assert "filter_applied" not in caplog.text
        assert state.settle_filter(now=1.0)
    assert caplog.text.count("filter_applied") == 1


def test_add_dialog_stays_open_only_for_its_own_actions() -> None:
    state = ProjectsPageState()
    assert state.sync_add_dialog(opened=True, interacted=False)
    assert state.sync_add_dialog(opened=False, interacted=True)
    # any other rerun means the dialog was dismissed
    assert not state.sync_add_dialog(opened=False, interacted=False)
    assert not state.is_add_open
    assert not state.sync_add_dialog(opened=False, interacted=True)


def test_reopening_the_add_dialog_starts_from_a_blank_draft() -> None:
    state = ProjectsPageState()
    state.sync_add_dialog(opened=True, interacted=False)
    state.draft = ProjectDraft(title="half typed")
    state.form_error = TITLE_REQUIRED
    state.sync_add_dialog(opened=False, interacted=False)
    assert state.sync_add_dialog(opened=True, interacted=False)
    assert state.draft == ProjectDraft()
    assert state.form_error is None
