"""Tests for string and duration similarity primitives."""

import pytest
from tunebridge.lib.similarity import (
    clamp_score,
    clean_artist,
    clean_title,
    duration_score,
    levenshtein_distance,
    levenshtein_similarity,
    normalize_for_dedup,
    string_similarity,
)


class TestLevenshtein:
    """Tests for edit distance helpers."""

    def test_distance(self) -> None:
        assert levenshtein_distance("kitten", "sitting") == 3
        assert levenshtein_distance("", "abc") == 3
        assert levenshtein_distance("same", "same") == 0

    def test_similarity_normalized_by_longer_string(self) -> None:
        assert levenshtein_similarity("kitten", "sitting") == pytest.approx(1 - 3 / 7)

    def test_similarity_of_two_empty_strings(self) -> None:
        assert levenshtein_similarity("", "") == 1.0


class TestStringSimilarity:
    """Tests for string_similarity."""

    def test_identical(self) -> None:
        assert string_similarity("queen", "queen") == 1.0

    def test_both_empty_are_identical(self) -> None:
        assert string_similarity("", "") == 1.0

    @pytest.mark.parametrize(("a", "b"), [("", "queen"), ("queen", "   ")])
    def test_blank_side_scores_zero(self, a: str, b: str) -> None:
        assert string_similarity(a, b) == 0.0

    def test_containment_uses_length_ratio(self) -> None:
        assert string_similarity("queen", "queen live") == pytest.approx(0.5)
        assert string_similarity("queen live", "queen") == pytest.approx(0.5)

    def test_token_jaccard(self) -> None:
        # {bohemian, rhapsody} vs {rhapsody, in, blue}: 1 shared of 4
        assert string_similarity(
            "bohemian rhapsody", "rhapsody in blue"
        ) == pytest.approx(0.25)

    def test_single_character_tokens_are_ignored(self) -> None:
        # "a" is dropped, leaving {song} vs {song, two}
        assert string_similarity("a song", "song two") == pytest.approx(0.5)

    def test_falls_back_to_levenshtein_without_usable_tokens(self) -> None:
        assert string_similarity("a b", "c d") == pytest.approx(1 - 2 / 3)

    def test_disjoint_words_score_zero(self) -> None:
        assert string_similarity("hello", "goodbye") == 0.0

    def test_symmetric(self) -> None:
        pairs = [("karma police", "police karma"), ("abc", "abd"), ("x y", "xy z")]
        for a, b in pairs:
            assert string_similarity(a, b) == pytest.approx(string_similarity(b, a))


class TestDurationScore:
    """Tests for duration_score tiers."""

    @pytest.mark.parametrize(
        ("diff", "expected"),
        [
            (0, 1.0),
            (3_000, 1.0),
            (3_001, 0.8),
            (15_000, 0.8),
            (15_001, 0.5),
            (30_000, 0.5),
            (30_001, 0.2),
            (60_000, 0.2),
            (60_001, 0.0),
            (600_000, 0.0),
        ],
    )
    def test_tiers_are_inclusive(self, diff: int, expected: float) -> None:
        assert duration_score(200_000, 200_000 + diff) == expected
        assert duration_score(200_000 + diff, 200_000) == expected

    def test_non_increasing_with_difference(self) -> None:
        scores = [duration_score(0, diff) for diff in range(0, 90_000, 500)]
        assert scores == sorted(scores, reverse=True)


class TestClampScore:
    """Tests for clamp_score."""

    @pytest.mark.parametrize(
        ("score", "expected"), [(-0.2, 0.0), (0.0, 0.0), (0.5, 0.5), (1.03, 1.0)]
    )
    def test_clamp(self, score: float, expected: float) -> None:
        assert clamp_score(score) == expected


class TestCleanTitle:
    """Tests for clean_title."""

    @pytest.mark.parametrize(
        ("title", "expected"),
        [
            ("Bohemian Rhapsody (Official Video)", "Bohemian Rhapsody"),
            ("Song [Official Music Video]", "Song"),
            ("Song (Lyrics)", "Song"),
            ("Song (Audio)", "Song"),
            ("Song (HD)", "Song"),
            ("Song [hq]", "Song"),
            ("Song - Topic", "Song"),
            ("Song (Official Audio) (HD)", "Song"),
        ],
    )
    def test_strips_decorations(self, title: str, expected: str) -> None:
        assert clean_title(title) == expected

    @pytest.mark.parametrize(
        "title",
        ["Song (feat. Someone)", "Song (Remastered 2011)", "Audio Song", "HD Song"],
    )
    def test_keeps_meaningful_text(self, title: str) -> None:
        assert clean_title(title) == title


class TestCleanArtist:
    """Tests for clean_artist."""

    @pytest.mark.parametrize(
        ("artist", "expected"),
        [
            ("Queen - Topic", "Queen"),
            ("QueenVEVO", "Queen"),
            ("Queen VEVO", "Queen"),
            ("VEVO Queen", "Queen"),
            ("Adele Official", "Adele"),
            ("  Muse  ", "Muse"),
        ],
    )
    def test_strips_decorations(self, artist: str, expected: str) -> None:
        assert clean_artist(artist) == expected

    def test_keeps_names_starting_with_vevo_letters(self) -> None:
        assert clean_artist("Vevonne") == "Vevonne"


class TestNormalizeForDedup:
    """Tests for normalize_for_dedup."""

    def test_strips_brackets_and_noise_words(self) -> None:
        assert normalize_for_dedup("Karma Police (Official Video) [HD]") == (
            "karma police"
        )

    def test_strips_bare_noise_words(self) -> None:
        assert normalize_for_dedup("Karma Police Official Lyrics") == "karma police"

    def test_keeps_words_that_only_contain_noise(self) -> None:
        assert normalize_for_dedup("Videotape") == "videotape"

    def test_equal_for_decorated_variants(self) -> None:
        assert normalize_for_dedup("Creep (Acoustic)") == normalize_for_dedup(
            "CREEP  [Live]"
        )
