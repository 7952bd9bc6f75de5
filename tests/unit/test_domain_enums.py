"""Tests for relation kinds and selection modes."""

import pytest

from storeadmin.domain.enums import RelationType, SelectionMode


@pytest.mark.parametrize(
    "kind",
    [RelationType.BELONGS_TO, RelationType.HAS_ONE],
)
def test_singular_kinds_select_single(kind: RelationType) -> None:
    assert kind.selection_mode is SelectionMode.SINGLE


@pytest.mark.parametrize(
    "kind",
    [
        RelationType.HAS_MANY,
        RelationType.BELONGS_TO_MANY,
        RelationType.MORPH_TO_MANY,
        RelationType.MORPHED_BY_MANY,
    ],
)
def test_plural_kinds_select_multiple(kind: RelationType) -> None:
    assert kind.selection_mode is SelectionMode.MULTIPLE


def test_many_to_many_kinds() -> None:
    assert RelationType.BELONGS_TO_MANY.is_many_to_many
    assert RelationType.MORPH_TO_MANY.is_many_to_many
    assert RelationType.MORPHED_BY_MANY.is_many_to_many
    assert not RelationType.HAS_MANY.is_many_to_many
    assert not RelationType.BELONGS_TO.is_many_to_many


def test_relation_type_values() -> None:
    assert RelationType.values() == [
        "belongsTo",
        "hasOne",
        "hasMany",
        "belongsToMany",
        "morphToMany",
        "morphedByMany",
    ]
    assert RelationType("morphToMany") is RelationType.MORPH_TO_MANY


def test_widget_mode() -> None:
    assert SelectionMode.SINGLE.widget_mode == "radio"
    assert SelectionMode.MULTIPLE.widget_mode == "checkbox"
