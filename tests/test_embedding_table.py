"""
Tests for the in-memory embedding table and its brute-force nearest search.
"""

import io

import pytest
import numpy as np
from wordmath.vector import EmbeddingTable, NearestResult, load_embeddings
from wordmath.vector.ops import as_vector, magnitude, normalize


SAMPLE_LINES = [
    "king 0.5 0.5 0.0",
    "queen 0.5 -0.5 0.0",
    "man 0.0 0.5 0.5",
    "woman 0.0 -0.5 0.5",
    "cat 0.0 0.0 1.0",
]


@pytest.fixture
def embeddings_file(tmp_path):
    """Write the sample embeddings to a temporary file."""
    path = tmp_path / "sample.txt"
    path.write_text("\n".join(SAMPLE_LINES), encoding="utf-8")
    return path


@pytest.fixture
def table():
    return EmbeddingTable.load(SAMPLE_LINES)


def test_load_from_file(embeddings_file):
    """Test loading a table from a file on disk."""
    table = load_embeddings(embeddings_file)

    assert table.size == 5
    assert len(table) == 5
    assert table.dimension == 3
    assert table.words() == ["king", "queen", "man", "woman", "cat"]


def test_load_from_stream():
    """Test loading from any iterable of lines, including trailing newlines."""
    stream = io.StringIO("\n".join(SAMPLE_LINES) + "\n")
    table = EmbeddingTable.load(stream)

    assert table.size == 5
    assert table.has("cat")


def test_vectors_are_normalized_on_load(table):
    """Test that stored vectors are unit length."""
    for word in table.words():
        assert magnitude(table.get(word)) == pytest.approx(1.0, abs=1e-4)

    np.testing.assert_allclose(table.get("king"), [0.70710677, 0.70710677, 0.0], atol=1e-6)


def test_lookup_is_exact_and_case_sensitive(table):
    """Test get/has behaviour for present, absent and differently-cased words."""
    assert table.get("unknown") is None
    assert not table.has("unknown")
    assert table.get("King") is None
    assert "king" in table
    assert "King" not in table


def test_duplicate_words_last_wins():
    """Test that a repeated word overwrites the earlier entry."""
    table = EmbeddingTable.load(["a 1.0 0.0", "b 0.0 1.0", "a 0.0 2.0"])

    assert table.size == 2
    assert table.words() == ["a", "b"]
    np.testing.assert_allclose(table.get("a"), [0.0, 1.0])


def test_non_numeric_field_becomes_nan():
    """Test that malformed numbers propagate NaN instead of failing the load."""
    table = EmbeddingTable.load(["odd 1.0 abc", "fine 1.0 0.0"])

    assert table.size == 2
    assert np.all(np.isnan(table.get("odd")))
    assert not np.any(np.isnan(table.get("fine")))


def test_blank_lines_are_skipped():
    """Test that empty lines do not create entries."""
    table = EmbeddingTable.load(["a 1.0 0.0", "", "b 0.0 1.0", ""])

    assert table.words() == ["a", "b"]


def test_max_words_limits_vocabulary(embeddings_file):
    """Test that loading stops after max_words entries."""
    table = load_embeddings(embeddings_file, max_words=2)

    assert table.words() == ["king", "queen"]


def test_mixed_dimensions_load():
    """Test that the table does not enforce a uniform dimension."""
    table = EmbeddingTable.load(["a 1.0 0.0", "b 1.0 0.0 0.0"])

    assert table.size == 2
    assert table.dimension == 2


def test_nearest_finds_identical_word_first(table):
    """Test that a word's own vector ranks first with similarity ~1."""
    nearest = table.nearest(table.get("king"), 3)

    assert len(nearest) == 3
    assert isinstance(nearest[0], NearestResult)
    assert nearest[0].word == "king"
    assert nearest[0].similarity == pytest.approx(1.0, abs=1e-4)
    assert nearest[1].word == "man"
    assert nearest[1].similarity == pytest.approx(0.5, abs=1e-4)


def test_nearest_ties_keep_insertion_order():
    """Test that equal similarities are returned in insertion order."""
    table = EmbeddingTable.load(["p 0 1 0", "q 0 0 1", "r 1 0 0", "s 0 -1 0"])
    nearest = table.nearest(as_vector([1.0, 0.0, 0.0]), 4)

    # p, q and s are all orthogonal to the query
    assert [r.word for r in nearest] == ["r", "p", "q", "s"]


def test_nearest_excludes_words(table):
    """Test that excluded words never appear in results."""
    nearest = table.nearest(table.get("king"), 5, exclude={"king", "man"})

    words = [r.word for r in nearest]
    assert "king" not in words
    assert "man" not in words
    assert len(nearest) == 3


def test_nearest_result_length(table):
    """Test the result length is min(n, table size minus excluded table words)."""
    assert len(table.nearest(table.get("cat"), 10)) == 5
    assert len(table.nearest(table.get("cat"), 10, exclude={"cat", "not_in_table"})) == 4
    assert len(table.nearest(table.get("cat"), 2, exclude={"cat"})) == 2
    assert table.nearest(table.get("cat"), 0) == []


def test_nearest_sorted_descending(table):
    """Test that results come back ordered by similarity."""
    query = as_vector([0.2, -0.3, 0.9])
    nearest = table.nearest(query, 5)

    similarities = [r.similarity for r in nearest]
    assert similarities == sorted(similarities, reverse=True)


def test_nearest_normalizes_query(table):
    """Test that query magnitude does not affect similarities."""
    query = as_vector([0.0, 3.0, 3.0])
    scaled = table.nearest(query, 5)
    unit = table.nearest(normalize(query), 5)

    assert [r.word for r in scaled] == [r.word for r in unit]
    for a, b in zip(scaled, unit):
        assert a.similarity == pytest.approx(b.similarity, abs=1e-5)
    assert scaled[0].word == "man"


def test_nearest_scores_are_cosine_similarity(table):
    """Test each score matches the dot product of unit vectors."""
    query = as_vector([1.0, 2.0, -1.0])
    unit_query = normalize(query)

    for result in table.nearest(query, 5):
        expected = float(np.dot(unit_query, table.get(result.word)))
        assert result.similarity == pytest.approx(expected, abs=1e-5)


def test_empty_table():
    """Test that an empty table has no dimension and no neighbours."""
    table = EmbeddingTable()

    assert table.size == 0
    assert table.dimension == 0
    assert table.nearest(as_vector([1.0, 0.0]), 5) == []


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
