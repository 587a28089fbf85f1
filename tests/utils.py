from typing import Any

from hypothesis import strategies as st

json_scalars = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    st.floats(allow_nan=False, allow_infinity=False),
    st.text(),
)


# Keep line breaks out of keys so that rendered declarations split cleanly on "\n".
json_keys = st.text(
    alphabet=st.characters(blacklist_categories=("Cc", "Cs", "Zl", "Zp")),
    max_size=8,
)


def _extend(children: st.SearchStrategy[Any]) -> st.SearchStrategy[Any]:
    return st.one_of(
        st.lists(children, max_size=5),
        st.dictionaries(json_keys, children, max_size=5),
    )


json_documents = st.recursive(json_scalars, _extend, max_leaves=20)
"""Plain Python data, as returned by `json.loads()`."""

json_objects = st.dictionaries(json_keys, json_documents, max_size=6)
