"""Unit tests for the rank sorter."""

from __future__ import annotations

from catalog_filters.filters import FacetValue, sort_values_by_rank


def _v(vid: int, *, rank: float = 0, is_rank: bool = True, disabled: bool = False, title: str = "") -> FacetValue:
    return FacetValue(id=vid, title=title or f"v{vid}", is_rank=is_rank, rank=rank, disabled=disabled)


class TestSortValuesByRank:
    def test_ranked_first_by_descending_rank(self) -> None:
        values = [_v(1, rank=1), _v(2, rank=5), _v(3, rank=3)]
        result = sort_values_by_rank(values)
        assert [v.id for v in result.values] == [2, 3, 1]

    def test_non_rank_values_keep_order_after_ranked(self) -> None:
        values = [_v(1, is_rank=False), _v(2, rank=2), _v(3, is_rank=False), _v(4, rank=9)]
        result = sort_values_by_rank(values)
        assert [v.id for v in result.values] == [4, 2, 1, 3]

    def test_equal_ranks_keep_input_order_not_title(self) -> None:
        values = [_v(1, rank=2, title="Zeta"), _v(2, rank=2, title="Alpha"), _v(3, rank=2, title="Mid")]
        result = sort_values_by_rank(values)
        assert [v.id for v in result.values] == [1, 2, 3]

    def test_counters(self) -> None:
        values = [_v(1, rank=1), _v(2, rank=2, disabled=True), _v(3, is_rank=False)]
        result = sort_values_by_rank(values)
        assert result.rank_count == 2
        assert result.rank_active_count == 1

    def test_without_counts(self) -> None:
        result = sort_values_by_rank([_v(1, rank=1)], with_counts=False)
        assert result.rank_count == 0
        assert result.rank_active_count == 0
        assert [v.id for v in result.values] == [1]

    def test_empty(self) -> None:
        result = sort_values_by_rank([])
        assert result.values == ()
        assert result.rank_count == 0
