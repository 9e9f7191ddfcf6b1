"""Property-based tests for configuration encoding and path lookup.

Uses hypothesis to generate arbitrary JSON documents and verify that
encoding, decoding and re-rendering agree for every representable tree,
not just the example configuration.
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from lsx.domain.config import ConfigTree
from lsx.domain.enums import OutputFormat
from lsx.domain.errors import UnencodableValueError
from lsx.domain.serializer import compact, decode, encode, reindent

# Dots separate path tokens, so generated keys never contain one.
_KEYS = st.from_regex(r"[a-z][a-z0-9_]{0,8}", fullmatch=True)

_SCALARS = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-(2**63), max_value=2**64 - 1),
    st.floats(allow_nan=False, allow_infinity=False),
    st.text(max_size=20),
)

_UNENCODABLE_NUMBERS = st.one_of(
    st.sampled_from([float("nan"), float("inf"), float("-inf")]),
    st.integers(min_value=2**64),
    st.integers(max_value=-(2**63) - 1),
)

_JSON_VALUES = st.recursive(
    _SCALARS,
    lambda children: st.lists(children, max_size=4) | st.dictionaries(_KEYS, children, max_size=4),
    max_leaves=20,
)

_DOCUMENTS = st.dictionaries(_KEYS, _JSON_VALUES, max_size=6)


@pytest.mark.os_agnostic
@given(document=_DOCUMENTS)
@settings(max_examples=150)
def test_decoding_an_encoding_restores_the_document(document: dict[str, object]) -> None:
    """decode(encode(tree)) equals the original tree in both formats."""
    tree = ConfigTree(document)

    assert decode(encode(tree)) == tree
    assert decode(encode(tree, OutputFormat.INDENTED)) == tree


@pytest.mark.os_agnostic
@given(document=_DOCUMENTS)
@settings(max_examples=150)
def test_reindent_and_compact_agree_with_encode(document: dict[str, object]) -> None:
    """Re-rendering compact text matches encoding the tree directly."""
    tree = ConfigTree(document)
    flat = encode(tree)

    assert reindent(flat) == encode(tree, OutputFormat.INDENTED)
    assert compact(reindent(flat)) == flat


@pytest.mark.os_agnostic
@given(document=st.dictionaries(_KEYS, st.dictionaries(_KEYS, _SCALARS, min_size=1, max_size=4), min_size=1, max_size=4))
@settings(max_examples=150)
def test_every_two_level_path_resolves_to_its_value(document: dict[str, dict[str, object]]) -> None:
    """Each outer.inner path of a lower-case document finds its stored value."""
    tree = ConfigTree(document)

    for outer, inner_map in document.items():
        for inner, value in inner_map.items():
            assert tree.get(f"{outer}.{inner}") == value or value is None


@pytest.mark.os_agnostic
@given(document=st.dictionaries(_KEYS, _JSON_VALUES, min_size=1, max_size=4))
@settings(max_examples=100)
def test_scoping_to_a_key_never_changes_the_parent_encoding(document: dict[str, object]) -> None:
    """Taking any scope leaves the parent's JSON untouched."""
    tree = ConfigTree(document)
    before = encode(tree)

    for key in document:
        tree.scope(key)

    assert encode(tree) == before


@pytest.mark.os_agnostic
@given(document=st.dictionaries(_KEYS, _JSON_VALUES, max_size=4), outer=_KEYS, inner=_KEYS, number=_UNENCODABLE_NUMBERS)
@settings(max_examples=150)
def test_numbers_without_lossless_json_are_refused_with_their_path(
    document: dict[str, object],
    outer: str,
    inner: str,
    number: float | int,
) -> None:
    """Non-finite floats and integers beyond 64 bits never encode silently."""
    document[outer] = {inner: [number]}
    tree = ConfigTree(document)

    with pytest.raises(UnencodableValueError) as exc:
        encode(tree)

    assert exc.value.path == f"{outer}.{inner}.0"
