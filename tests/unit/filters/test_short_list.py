"""Unit tests for the short-list composer."""

from __future__ import annotations

import pytest

from catalog_filters.config.validation import InvalidSettingValueError
from catalog_filters.filters import Facet, FacetValue, ShortListComposer


def _v(vid: int, title: str, *, rank: float = 0, is_rank: bool = False, disabled: bool = False) -> FacetValue:
    return FacetValue(id=vid, title=title, is_rank=is_rank, rank=rank, disabled=disabled)


def _ids(values) -> list:
    return [v.id for v in values]


# ---------------------------------------------------------------------------
# Ranked path
# ---------------------------------------------------------------------------


class TestRankedPath:
    def test_top_ranked_window_sorted_by_title(self) -> None:
        values = [
            _v(1, "Canon", rank=3, is_rank=True),
            _v(2, "Apple", rank=1, is_rank=True),
            _v(3, "Epson", rank=2, is_rank=True),
            _v(4, "Dell", rank=1, is_rank=True),
            _v(5, "Bosch", rank=5, is_rank=True),
        ]
        facet = ShortListComposer(3).compose(Facet("producer", values))

        assert _ids(facet.short_list) == [5, 1, 3]
        assert _ids(facet.values) == [5, 1, 3, 2, 4]
        assert facet.total_found == 5
        assert facet.total_filtered == 5

    def test_window_limited_to_ranked_count(self) -> None:
        values = [
            _v(1, "Zeta"),
            _v(2, "Yota", rank=1, is_rank=True),
            _v(3, "Alpha"),
            _v(4, "Xi", rank=4, is_rank=True),
        ]
        facet = ShortListComposer(10).compose(Facet("producer", values))

        assert _ids(facet.short_list) == [4, 2]
        assert _ids(facet.values) == [4, 2, 3, 1]

    def test_without_auto_ranking_window_is_default_size(self) -> None:
        values = [
            _v(1, "Delta"),
            _v(2, "Bravo"),
            _v(3, "Omega", rank=1, is_rank=True),
            _v(4, "Alpha"),
        ]
        facet = ShortListComposer(3).compose(Facet("state", values, with_auto_ranking=False))

        # rank-sorted: 3, 1, 2, 4 -> window 3, 1, 2 -> ranked part, then plain by title
        assert _ids(facet.short_list) == [3, 2, 1]
        assert _ids(facet.values) == [3, 2, 1, 4]

    def test_nothing_ranked_uses_default_size(self) -> None:
        values = [_v(i, t) for i, t in enumerate(["d", "c", "b", "a"], start=1)]
        facet = ShortListComposer(2).compose(Facet("series", values))

        assert _ids(facet.short_list) == [2, 1]
        assert _ids(facet.values) == [2, 1, 4, 3]

    def test_title_order_is_case_insensitive(self) -> None:
        values = [_v(1, "bosch"), _v(2, "Apple"), _v(3, "Canon")]
        facet = ShortListComposer(5).compose(Facet("producer", values))
        assert _ids(facet.short_list) == [2, 1, 3]

    def test_rest_puts_disabled_last(self) -> None:
        values = [
            _v(1, "Top", rank=1, is_rank=True),
            _v(2, "Alpha", disabled=True),
            _v(3, "Zulu"),
            _v(4, "Beta"),
        ]
        facet = ShortListComposer(10).compose(Facet("producer", values))

        assert _ids(facet.short_list) == [1]
        assert _ids(facet.values) == [1, 4, 3, 2]
        assert facet.total_filtered == 3
        assert facet.total_found == 4

    def test_sentinel_ids_dropped_from_rest(self) -> None:
        values = [
            _v(1, "Top", rank=1, is_rank=True),
            FacetValue(id=0, title="Any"),
            FacetValue(id=None, title="Other"),
            _v(2, "Beta"),
        ]
        facet = ShortListComposer(10).compose(Facet("producer", values))

        assert _ids(facet.values) == [1, 2]
        assert facet.total_found == 4

    def test_empty_values(self) -> None:
        facet = ShortListComposer(3).compose(Facet("producer", []))
        assert facet.short_list == ()
        assert facet.values == ()
        assert facet.total_found == 0
        assert facet.total_filtered == 0

    def test_short_list_values_are_the_same_objects(self) -> None:
        values = [_v(1, "b"), _v(2, "a")]
        facet = ShortListComposer(3).compose(Facet("producer", values))
        assert all(any(s is v for v in values) for s in facet.short_list)


# ---------------------------------------------------------------------------
# No-ranking path
# ---------------------------------------------------------------------------


class TestNoRankingPath:
    def test_values_untouched_short_list_is_prefix(self) -> None:
        values = [
            _v(1, "1000-2000", rank=9, is_rank=True),
            _v(2, "0-1000"),
            _v(3, "2000-5000", disabled=True),
        ]
        facet = ShortListComposer(2).compose(Facet("price", values, disallow_auto_ranking=True))

        assert _ids(facet.values) == [1, 2, 3]
        assert _ids(facet.short_list) == [1, 2]
        assert facet.total_found == 3
        assert facet.total_filtered == 2

    def test_empty(self) -> None:
        facet = ShortListComposer(2).compose(Facet("price", [], disallow_auto_ranking=True))
        assert facet.total_found == 0
        assert facet.short_list == ()


class TestComposerConfiguration:
    @pytest.mark.parametrize("size", [0, -1, True, "10"])
    def test_invalid_size_rejected(self, size: object) -> None:
        with pytest.raises(InvalidSettingValueError):
            ShortListComposer(size)  # type: ignore[arg-type]

    def test_size_exposed(self) -> None:
        assert ShortListComposer(4).default_short_list_size == 4
