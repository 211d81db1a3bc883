import pytest

from herbafric.pipeline.preparation import (
    PreparationResolver,
    base_name,
    iter_preparation_lines,
    resolve_preparations,
)
from herbafric.schemas import HerbRecord


def herbs_named(*names):
    return [HerbRecord(name=name) for name in names]


@pytest.mark.parametrize(
    "name,expected",
    [
        ("Moringa (Moringa oleifera)", "moringa"),
        ("Bitter Leaf", "bitter leaf"),
        ("  Garlic  (Allium sativum) (Ayu)", "garlic"),
        ("(unknown)", ""),
    ],
)
def test_base_name(name, expected):
    assert base_name(name) == expected


def test_candidate_preparation_lines():
    region = (
        "& Use:\n"
        "• Scent leaf tea: Boil leaves, drink.\n"
        "Leaves can be chewed raw.\n"
        "Drink twice daily.\n"
        "   •   Liver stew: Cook with tomatoes.  \n"
        "•\n"
    )
    assert list(iter_preparation_lines(region)) == [
        "Scent leaf tea: Boil leaves, drink.",
        "Leaves can be chewed raw.",
        "Liver stew: Cook with tomatoes.",
    ]


def test_fallback_broadcast_fills_every_unmatched_herb():
    herbs = herbs_named("Neem", "Garlic")
    resolve_preparations("• Boil and drink.", herbs)
    assert [h.preparation for h in herbs] == ["Boil and drink.", "Boil and drink."]


def test_targeted_match_precedence():
    herbs = herbs_named("Moringa (Moringa oleifera)", "Garlic")
    resolve_preparations(
        "• Moringa leaves can be boiled.\n• Garlic cloves can be crushed.", herbs
    )
    assert herbs[0].preparation == "Moringa leaves can be boiled."
    assert herbs[1].preparation == "Garlic cloves can be crushed."


def test_targeted_pass_assigns_at_most_one_herb():
    resolver = PreparationResolver(herbs_named("Moringa", "Garlic"))
    assert resolver.targeted_pass("Crush garlic and moringa together.") == 0
    assert [h.preparation for h in resolver.herbs] == [
        "Crush garlic and moringa together.",
        "",
    ]
    assert resolver.targeted_pass("Nothing relevant here.") is None


def test_targeted_assignment_is_never_overwritten():
    herbs = herbs_named("Garlic")
    resolve_preparations(
        "• Garlic water: crush 2 cloves in warm water.\n• Garlic can be eaten raw.",
        herbs,
    )
    assert herbs[0].preparation == "Garlic water: crush 2 cloves in warm water."


def test_broadcast_pass_only_touches_empty_herbs():
    resolver = PreparationResolver(herbs_named("Neem", "Garlic", "Ginger"))
    resolver.targeted_pass("Garlic tea.")
    assert resolver.broadcast_pass("Boil and drink.") == [0, 2]
    assert [h.preparation for h in resolver.herbs] == [
        "Boil and drink.",
        "Garlic tea.",
        "Boil and drink.",
    ]
    # Nothing left empty: a second broadcast is a no-op.
    assert resolver.broadcast_pass("Rest.") == []


def test_broadcast_fires_after_first_line():
    # The first generic line reaches every herb without a targeted match,
    # so later generic lines have nothing left to fill.
    herbs = herbs_named("Moringa", "Garlic", "Neem")
    resolve_preparations("• Moringa can be boiled.\n• Drink twice daily.", herbs)
    assert [h.preparation for h in herbs] == ["Moringa can be boiled."] * 3


def test_herbs_with_empty_base_name_are_never_targeted():
    resolver = PreparationResolver(herbs_named("(unknown)", "Garlic"))
    assert resolver.targeted_pass("Garlic (crushed) with honey.") == 1


def test_list_is_updated_in_place_with_new_records():
    herbs = herbs_named("Neem")
    original = herbs[0]
    resolve_preparations("• Boil and drink.", herbs)
    assert original.preparation == ""
    assert herbs[0] is not original
    assert herbs[0].name == "Neem"


def test_no_candidate_lines_leaves_herbs_untouched():
    herbs = herbs_named("Neem")
    resolve_preparations("Warning:\nSee a doctor.\n", herbs)
    assert herbs[0].preparation == ""
