"""Tests for the Bridge between refined beverages and ingredients."""
import pytest

from patterns.bridge import (
    INGREDIENTS,
    REFINED_BEVERAGES,
    Milk,
    RefinedCoffee,
    RefinedTea,
    Sugar,
    make_refined_beverage,
)
from patterns.demos import capture


def test_refined_coffee_with_milk():
    assert capture(RefinedCoffee(Milk()).prepare) == [
        "Preparing a refined coffee.",
        "Adding milk.",
    ]


@pytest.mark.parametrize("beverage_class", [RefinedCoffee, RefinedTea])
@pytest.mark.parametrize("ingredient_class", [Milk, Sugar])
def test_every_pairing_emits_beverage_then_ingredient(beverage_class, ingredient_class):
    lines = capture(beverage_class(ingredient_class()).prepare)
    assert len(lines) == 2
    assert lines[0].startswith("Preparing a refined ")
    assert lines[1] == capture(ingredient_class().add)[0]


def test_ingredient_is_retained():
    milk = Milk()
    assert RefinedTea(milk).ingredient is milk


def test_same_ingredient_shared_between_beverages():
    sugar = Sugar()
    assert capture(RefinedCoffee(sugar).prepare) == ["Preparing a refined coffee.", "Adding sugar."]
    assert capture(RefinedTea(sugar).prepare) == ["Preparing a refined tea.", "Adding sugar."]


def test_prepare_writes_to_stdout_by_default(capsys):
    RefinedTea(Sugar()).prepare()
    assert capsys.readouterr().out == "Preparing a refined tea.\nAdding sugar.\n"


def test_missing_ingredient_fails_on_use(capsys):
    beverage = RefinedCoffee(None)
    with pytest.raises(AttributeError):
        beverage.prepare()
    assert capsys.readouterr().out == "Preparing a refined coffee.\n"


def test_make_refined_beverage():
    beverage = make_refined_beverage("Tea", "milk")
    assert isinstance(beverage, RefinedTea)
    assert isinstance(beverage.ingredient, Milk)


@pytest.mark.parametrize("beverage, ingredient", [("juice", "milk"), ("coffee", "honey")])
def test_make_refined_beverage_unknown_kind(beverage, ingredient):
    assert make_refined_beverage(beverage, ingredient) is None


def test_lookup_tables():
    assert sorted(REFINED_BEVERAGES) == ["coffee", "tea"]
    assert sorted(INGREDIENTS) == ["milk", "sugar"]
