"""Tests for the odometer enumeration of accessors."""
import logging

import pytest

from swizzle_generator.errors import AccessorCollision, MalformedSpec
from swizzle_generator.generator.enumeration import (
    count_accessors,
    generate_accessors,
    iter_accessors,
    iter_choices,
)
from swizzle_generator.model.declaration import (
    CombinationBlockDeclaration,
    SelfSwizzleDeclaration,
)
from swizzle_generator.model.swizzle import DestinationField, SwizzleSpec
from swizzle_generator.normalizer import normalize


def _self(*fields: str) -> SwizzleSpec:
    return normalize(SelfSwizzleDeclaration(shape="Shape", fields=list(fields)))


def test_two_field_order():
    names = [a.name for a in generate_accessors(_self("x", "y"))]

    assert names == ["xx", "xy", "yx", "yy"]


def test_three_field_order():
    names = [a.name for a in generate_accessors(_self("a", "b", "c"))]

    assert names[:10] == ["aaa", "aab", "aac", "aba", "abb", "abc", "aca", "acb", "acc", "baa"]
    assert names[-1] == "ccc"
    assert names == sorted(names)


@pytest.mark.parametrize("n", [1, 2, 3, 4])
def test_self_swizzle_count_is_n_to_the_n(n):
    spec = _self(*"wxyz"[:n])

    assert count_accessors(spec) == n**n
    assert len(generate_accessors(spec)) == n**n


def test_combination_count_is_product_of_candidate_counts():
    spec = normalize(
        CombinationBlockDeclaration(
            source="Rgba",
            destination="Rgb",
            fields={"r": ["r", "g", "b", "a"], "g": ["g"], "b": ["b", "a"]},
        )
    )

    assert count_accessors(spec) == 8
    assert [a.name for a in generate_accessors(spec)] == [
        "rgb", "rga", "ggb", "gga", "bgb", "bga", "agb", "aga",
    ]


def test_candidate_order_drives_generation_order():
    spec = normalize(
        CombinationBlockDeclaration(
            source="Vec2", destination="Vec2", fields={"x": ["y", "x"], "y": ["x", "y"]}
        )
    )

    assert [a.name for a in generate_accessors(spec)] == ["yx", "yy", "xx", "xy"]


def test_assignments_follow_destination_fields():
    spec = normalize(
        CombinationBlockDeclaration(
            source="Vec3", destination="Vec2", fields={"x": ["x", "y", "z"], "y": ["x", "y", "z"]}
        )
    )

    accessor = generate_accessors(spec)[7]  # zy

    assert accessor.name == "zy"
    assert accessor.destination_type == "Vec2"
    assert [(a.destination, a.source) for a in accessor.assignments] == [("x", "z"), ("y", "y")]
    assert len(accessor.assignments) == len(spec.fields)


def test_single_field_combination_yields_one_accessor():
    spec = normalize(
        CombinationBlockDeclaration(
            source="Scalar", destination="Vec2", fields={"x": ["x"], "y": ["x"]}
        )
    )

    accessors = generate_accessors(spec)

    assert [a.name for a in accessors] == ["xx"]
    assert accessors[0].doc == "Get a new `Vec2` with the values swizzled: xx"


def test_iter_choices_is_lazy():
    spec = _self(*"abcdefgh")  # 8^8 combinations
    choices = iter_choices(spec)

    assert next(choices) == ("a",) * 8
    assert next(choices) == ("a",) * 7 + ("b",)


def test_iter_accessors_matches_choices():
    spec = _self("x", "y")

    assert [a.choices for a in iter_accessors(spec)] == list(iter_choices(spec))


def test_ambiguous_concatenation_raises_collision():
    spec = SwizzleSpec(
        destination_type="Pair",
        fields=[
            DestinationField(name="first", candidates=["a", "ab"]),
            DestinationField(name="second", candidates=["bc", "c"]),
        ],
    )

    with pytest.raises(AccessorCollision, match="abc"):
        generate_accessors(spec)


def test_large_product_logs_warning_without_limiting(caplog):
    spec = _self("a", "b", "c")

    with caplog.at_level(logging.WARNING):
        accessors = generate_accessors(spec, warn_above=10)

    assert len(accessors) == 27
    assert "27 accessors" in caplog.text


def test_malformed_spec_is_rejected_before_enumeration():
    spec = SwizzleSpec(destination_type="Vec2", fields=[])

    with pytest.raises(MalformedSpec):
        count_accessors(spec)
    with pytest.raises(MalformedSpec):
        iter_choices(spec)
