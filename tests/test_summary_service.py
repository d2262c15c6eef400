"""
Tests for the recipe resolver.

Verifies:
- Cook time and base quantities multiply down nested recipes
- Contributions reaching one ingredient through different paths add up
- Every failure kind aborts the whole summary
"""

import pytest

from app.exceptions import (
    CyclicRequirementError,
    ExpansionDepthError,
    InvalidEntityTypeError,
    MissingRequirementError,
    RecipeNotFoundError,
)
from domain.enums import ResolutionErrorKind
from domain.models import CookbookEntry
from repositories import CookbookRepository
from services.entry_service import EntryService
from services.summary_service import SummaryService
from test_fixtures import BAKERY, as_dict, ingredient, recipe


def load(entry_service: EntryService, *payloads: dict) -> None:
    for payload in payloads:
        entry_service.insert(payload)


# =============================================================================
# SUCCESSFUL SUMMARIES
# =============================================================================


def test_single_level_recipe(entry_service: EntryService, summary_service: SummaryService):
    load(entry_service, ingredient("Flour", 2), recipe("Bread", ("Flour", 2)))

    resolution = summary_service.summarize("Bread")

    assert resolution.ok
    assert resolution.failure is None
    summary = resolution.summary
    assert summary.name == "Bread"
    assert summary.cook_time == 4
    assert as_dict([i.model_dump() for i in summary.ingredients]) == {"Flour": 2}


def test_same_ingredient_through_sub_recipe_and_directly(
    entry_service: EntryService, summary_service: SummaryService
):
    """Flour reached via Dough and via Bread itself is summed"""
    load(
        entry_service,
        ingredient("Flour", 2),
        recipe("Dough", ("Flour", 2)),
        recipe("Bread", ("Dough", 1), ("Flour", 1)),
    )

    summary = summary_service.get_summary("Bread")

    assert summary.cook_time == 6
    assert [(i.name, i.quantity) for i in summary.ingredients] == [("Flour", 3)]


def test_nested_multipliers(entry_service: EntryService, summary_service: SummaryService):
    load(entry_service, *BAKERY)

    summary = summary_service.get_summary("Sandwich")

    # Bread x2 -> Dough x2 -> Flour x4, Water x2; Flour x2, Salt x2; Cheese x1; Ham x2
    assert summary.cook_time == 27
    assert [(i.name, i.quantity) for i in summary.ingredients] == [
        ("Flour", 6),
        ("Water", 2),
        ("Salt", 2),
        ("Cheese", 1),
        ("Ham", 2),
    ]


def test_diamond_shaped_requirements(entry_service: EntryService, summary_service: SummaryService):
    """Two sub-recipes sharing a third count the shared one twice"""
    load(
        entry_service,
        ingredient("Butter", 1),
        recipe("Roux", ("Butter", 2)),
        recipe("Bechamel", ("Roux", 1)),
        recipe("Veloute", ("Roux", 3)),
        recipe("Lasagne", ("Bechamel", 2), ("Veloute", 1)),
    )

    summary = summary_service.get_summary("Lasagne")

    assert as_dict([i.model_dump() for i in summary.ingredients]) == {"Butter": 10}
    assert summary.cook_time == 10


def test_recipe_without_requirements(entry_service: EntryService, summary_service: SummaryService):
    load(entry_service, recipe("Air"))

    summary = summary_service.get_summary("Air")

    assert summary.cook_time == 0
    assert summary.ingredients == []


def test_zero_cook_time_ingredient_still_listed(
    entry_service: EntryService, summary_service: SummaryService
):
    load(entry_service, ingredient("Water", 0), recipe("Ice", ("Water", 3)))

    summary = summary_service.get_summary("Ice")

    assert summary.cook_time == 0
    assert as_dict([i.model_dump() for i in summary.ingredients]) == {"Water": 3}


def test_large_quantities_exact(entry_service: EntryService, summary_service: SummaryService):
    load(
        entry_service,
        ingredient("Grain", 3),
        recipe("Sack", ("Grain", 1_000_000)),
        recipe("Silo", ("Sack", 1_000_000)),
    )

    summary = summary_service.get_summary("Silo")

    assert summary.cook_time == 3 * 10**12
    assert summary.ingredients[0].quantity == 10**12


def test_summary_is_repeatable(entry_service: EntryService, summary_service: SummaryService):
    load(entry_service, *BAKERY)

    first = summary_service.get_summary("Sandwich")
    second = summary_service.get_summary("Sandwich")

    assert first == second


def test_summary_does_not_modify_cookbook(
    entry_service: EntryService, summary_service: SummaryService, repository: CookbookRepository
):
    load(entry_service, *BAKERY)
    before = repository.get_all()

    summary_service.get_summary("Sandwich")

    assert repository.get_all() == before


# =============================================================================
# FAILURES
# =============================================================================


@pytest.mark.parametrize("name", ("Nothing", "Flour", "bread"))
def test_unknown_name_or_ingredient(
    entry_service: EntryService, summary_service: SummaryService, name: str
):
    load(entry_service, ingredient("Flour", 2), recipe("Bread", ("Flour", 2)))

    resolution = summary_service.summarize(name)

    assert not resolution.ok
    assert resolution.summary is None
    assert resolution.failure.kind == ResolutionErrorKind.NOT_FOUND_OR_NOT_RECIPE
    with pytest.raises(RecipeNotFoundError):
        summary_service.get_summary(name)


def test_missing_requirement(entry_service: EntryService, summary_service: SummaryService):
    load(entry_service, ingredient("Flour", 2), recipe("Bread", ("Flour", 2), ("Yeast", 1)))

    resolution = summary_service.summarize("Bread")

    assert resolution.summary is None
    assert resolution.failure.kind == ResolutionErrorKind.MISSING_REQUIREMENT
    assert resolution.failure.name == "Yeast"


def test_missing_requirement_deep_in_graph(
    entry_service: EntryService, summary_service: SummaryService
):
    """A missing leaf three levels down aborts the whole summary"""
    load(
        entry_service,
        ingredient("Flour", 2),
        recipe("Starter", ("Flour", 1), ("Wild Yeast", 1)),
        recipe("Dough", ("Starter", 1)),
        recipe("Sourdough", ("Flour", 5), ("Dough", 1)),
    )

    with pytest.raises(MissingRequirementError) as exc_info:
        summary_service.get_summary("Sourdough")

    assert exc_info.value.details == {"name": "Wild Yeast"}


def test_self_requiring_recipe(entry_service: EntryService, summary_service: SummaryService):
    load(entry_service, recipe("Ouroboros", ("Ouroboros", 1)))

    resolution = summary_service.summarize("Ouroboros")

    assert resolution.failure.kind == ResolutionErrorKind.CYCLIC_REQUIREMENT
    with pytest.raises(CyclicRequirementError):
        summary_service.get_summary("Ouroboros")


def test_indirect_cycle(entry_service: EntryService, summary_service: SummaryService):
    load(
        entry_service,
        ingredient("Egg", 1),
        recipe("Chicken", ("Egg", 1), ("Hen", 1)),
        recipe("Hen", ("Chicken", 1)),
    )

    resolution = summary_service.summarize("Chicken")

    assert resolution.failure.kind == ResolutionErrorKind.CYCLIC_REQUIREMENT
    assert "Chicken -> Hen -> Chicken" in resolution.failure.message


def test_depth_limit(entry_service: EntryService, repository: CookbookRepository):
    load(entry_service, ingredient("Seed", 1), recipe("Level 0", ("Seed", 1)))
    for level in range(1, 6):
        load(entry_service, recipe(f"Level {level}", (f"Level {level - 1}", 1)))

    shallow = SummaryService(repository, max_depth=6)
    assert shallow.get_summary("Level 5").cook_time == 1

    strict = SummaryService(repository, max_depth=5)
    resolution = strict.summarize("Level 5")
    assert resolution.failure.kind == ResolutionErrorKind.DEPTH_EXCEEDED
    with pytest.raises(ExpansionDepthError):
        strict.get_summary("Level 5")


def test_unknown_stored_type(repository: CookbookRepository, summary_service: SummaryService):
    """Entries that bypassed validation with an unknown tag cannot be expanded"""
    repository.add(CookbookEntry.model_construct(name="Whisk", type="tool"))
    EntryService(repository).insert(recipe("Meringue", ("Whisk", 1)))

    resolution = summary_service.summarize("Meringue")

    assert resolution.failure.kind == ResolutionErrorKind.INVALID_ENTITY_TYPE
    with pytest.raises(InvalidEntityTypeError):
        summary_service.get_summary("Meringue")


def test_chain_deeper_than_interpreter_stack(entry_service: EntryService, repository: CookbookRepository):
    """Without an effective depth cap a very deep chain still fails as DEPTH_EXCEEDED"""
    load(entry_service, ingredient("Seed", 1), recipe("Level 0", ("Seed", 1)))
    for level in range(1, 1500):
        load(entry_service, recipe(f"Level {level}", (f"Level {level - 1}", 1)))

    unbounded = SummaryService(repository, max_depth=100_000)
    resolution = unbounded.summarize("Level 1499")

    assert resolution.summary is None
    assert resolution.failure.kind == ResolutionErrorKind.DEPTH_EXCEEDED
    with pytest.raises(ExpansionDepthError):
        unbounded.get_summary("Level 1499")
