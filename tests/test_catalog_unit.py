from __future__ import annotations

import pytest

from taskflow_core.catalog import ProjectCatalog
from taskflow_core.models import ProjectDraft, ProjectItem
from taskflow_core.seed_data import SEED_PROJECTS
from taskflow_core.validation import TITLE_REQUIRED, ProjectValidationError


def _fixed_clock(value: int = 1700000000000):
    return lambda: value


def test_catalog_starts_from_a_copy_of_the_seed() -> None:
    seed = [ProjectItem(id="1", title="One")]
    catalog = ProjectCatalog(seed, clock=_fixed_clock())
    catalog.add(ProjectDraft(title="Two"))
    assert len(seed) == 1
    assert len(catalog) == 2


def test_add_prepends_new_project_with_trimmed_fields() -> None:
    catalog = ProjectCatalog([ProjectItem(id="1", title="One")], clock=_fixed_clock())
    item = catalog.add(ProjectDraft(title="  New thing ", description="  ", image=" https://x/y.png ", meta=" Go "))

    assert catalog.items[0] == item
    assert item.id == "p-1700000000000"
    assert item.title == "New thing"
    assert item.description is None
    assert item.image == "https://x/y.png"
    assert item.meta == "Go"


def test_add_without_title_raises_and_leaves_catalog_unchanged() -> None:
    catalog = ProjectCatalog([ProjectItem(id="1", title="One")], clock=_fixed_clock())
    with pytest.raises(ProjectValidationError) as excinfo:
        catalog.add(ProjectDraft(title="   ", description="no title"))
    assert str(excinfo.value) == TITLE_REQUIRED
    assert [p.id for p in catalog] == ["1"]


def test_ids_stay_unique_within_the_same_millisecond() -> None:
    catalog = ProjectCatalog(clock=_fixed_clock(42))
    first = catalog.add(ProjectDraft(title="A"))
    second = catalog.add(ProjectDraft(title="B"))
    third = catalog.add(ProjectDraft(title="C"))
    assert {first.id, second.id, third.id} == {"p-42", "p-43", "p-44"}
    assert [p.title for p in catalog] == ["C", "B", "A"]


def test_get_compares_ids_by_string_form() -> None:
    catalog = ProjectCatalog([ProjectItem(id=7, title="Seven"), ProjectItem(id="x", title="Ex")])
    assert catalog.get("7").title == "Seven"
    assert catalog.get(7).title == "Seven"
    assert catalog.get("x").title == "Ex"
    assert catalog.get("missing") is None


def test_filtered_uses_fuzzy_matching_on_title_description_and_meta() -> None:
    catalog = ProjectCatalog(SEED_PROJECTS)
    titles = [p.title for p in catalog.filtered("next.js")]
    assert titles == ["Portfolio Website"]
    assert len(catalog.filtered("")) == len(SEED_PROJECTS)


def test_new_projects_are_searchable() -> None:
    catalog = ProjectCatalog(SEED_PROJECTS, clock=_fixed_clock())
    catalog.add(ProjectDraft(title="Garden Planner", meta="Python"))
    assert [p.title for p in catalog.filtered("garden python")] == ["Garden Planner"]


def test_seed_projects_have_unique_ids_and_titles() -> None:
    ids = [str(p.id) for p in SEED_PROJECTS]
    assert len(ids) == len(set(ids))
    assert all(p.title.strip() for p in SEED_PROJECTS)
