"""Tests for identifier visibility and reserved names."""

from hypothesis import given
from hypothesis import strategies as st

import qmeta
from metatest import params


@params(
    "name expected",
    upper=("Name", True),
    lower=("name", False),
    single=("X", True),
    empty=("", False),
    underscore=("_Name", False),
    digit=("1Name", False),
    dollar=("$neg", False),
    accented=("Élan", True),
    greek=("Ωmega", True),
    greek_lower=("ωmega", False),
    titlecase=("ǅemal", False),
)
def test_is_exported(key, name, expected):
    """Only a leading uppercase letter exports a name."""
    assert qmeta.is_exported(name) is expected


@given(
    st.characters(whitelist_categories=["Lu"]),
    st.text(),
)
def test_uppercase_start_is_exported(first, rest):
    """Any uppercase letter followed by anything is exported."""
    assert qmeta.is_exported(first + rest)


@given(
    st.characters(blacklist_categories=["Lu"]),
    st.text(),
)
def test_other_start_is_not_exported(first, rest):
    """Anything not starting with an uppercase letter is hidden."""
    assert not qmeta.is_exported(first + rest)


def test_reserved_names():
    """Reserved prefixes are recognized by the shared predicates."""
    assert qmeta.NAME_KEY == "_name"
    assert qmeta.is_private(qmeta.NAME_KEY)
    assert qmeta.is_private("_hidden")
    assert not qmeta.is_private("shown")
    assert not qmeta.is_private(12)

    assert qmeta.is_internal("$neg")
    assert not qmeta.is_internal("neg")
    assert not qmeta.is_internal("_neg")
