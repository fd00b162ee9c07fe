"""Sales Aggregation tests — pure ordering, grouping, ranking and summaries.

Tests cover:
    - name_matches: case-insensitive substring, empty query matches all
    - newest_first: date desc, ties by ascending sale id
    - group_by_customer: exact Decimal sums and counts
    - rank_customer_ids: total desc, explicit ascending-id tie-break, top_n cap,
      non-positive top_n
    - build_ranking / build_recent_rows: placeholder for unresolved ids
    - summarize_sales: extremes, avg x count ~ revenue, None on empty input

Design Decisions:
    - Pure core functions: no mocks, no fixtures beyond plain records
"""

from datetime import datetime
from decimal import Decimal

from sales_ledger.core import sales_aggregation as agg
from sales_ledger.core.date_window import DateWindow
from tests.ledger_fixtures import CUSTOMERS, NOW, SALES, make_customer, make_sale


def test_name_matches_is_case_insensitive():
    acme = make_customer(1, "Acme Corp")
    assert agg.name_matches(acme, "acme")
    assert agg.name_matches(acme, "ME CO")
    assert not agg.name_matches(acme, "globex")


def test_empty_query_matches_everyone():
    assert all(agg.name_matches(c, "") for c in CUSTOMERS)


def test_order_customers_sorts_by_id():
    shuffled = [CUSTOMERS[2], CUSTOMERS[0], CUSTOMERS[3], CUSTOMERS[1]]
    assert [c.id for c in agg.order_customers(shuffled)] == [1, 2, 3, 4]


def test_newest_first_breaks_ties_by_sale_id():
    ordered = agg.newest_first(SALES)
    assert [s.id for s in ordered] == [8, 3, 6, 7, 5, 2, 4, 1]


def test_newest_first_is_independent_of_input_order():
    assert agg.newest_first(reversed(SALES)) == agg.newest_first(SALES)


def test_within_window_is_inclusive():
    window = DateWindow(
        start=datetime(2025, 4, 1, 8, 0), end=datetime(2025, 5, 5, 10, 0),
        explicit=True,
    )
    assert sorted(s.id for s in agg.within_window(SALES, window)) == [3, 6, 7]


def test_total_amount_is_exact():
    assert agg.total_amount(SALES[:2]) == Decimal("2050.50")
    assert agg.total_amount([]) == Decimal("0")


def test_group_by_customer_sums_and_counts():
    groups = agg.group_by_customer(SALES)
    assert groups[1] == (Decimal("5250.50"), 3)
    assert groups[2] == (Decimal("2000.00"), 2)
    assert groups[3] == (Decimal("449.99"), 2)
    assert groups[99] == (Decimal("75.25"), 1)
    assert 4 not in groups


def test_rank_orders_by_total_descending():
    groups = agg.group_by_customer(SALES)
    assert agg.rank_customer_ids(groups, 10) == [1, 2, 3, 99]


def test_rank_breaks_ties_by_ascending_customer_id():
    sales = [
        make_sale(1, 7, "100.00", NOW),
        make_sale(2, 3, "100.00", NOW),
        make_sale(3, 5, "100.00", NOW),
    ]
    groups = agg.group_by_customer(sales)
    assert agg.rank_customer_ids(groups, 3) == [3, 5, 7]


def test_rank_caps_at_top_n():
    groups = agg.group_by_customer(SALES)
    assert agg.rank_customer_ids(groups, 2) == [1, 2]


def test_rank_with_non_positive_top_n_is_empty():
    groups = agg.group_by_customer(SALES)
    assert agg.rank_customer_ids(groups, 0) == []
    assert agg.rank_customer_ids(groups, -3) == []


def test_build_ranking_uses_placeholder_for_unknown_customer():
    groups = agg.group_by_customer(SALES)
    lookup = {c.id: c for c in CUSTOMERS}
    rows = agg.build_ranking(groups, [1, 99], lookup)
    assert [r.name for r in rows] == ["Acme Corp", "Customer 99"]
    assert rows[1].total == Decimal("75.25")
    assert rows[1].count == 1


def test_summarize_sales_reports_literal_extremes():
    summary = agg.summarize_sales(SALES)
    assert summary.total_revenue == Decimal("7775.74")
    assert summary.total_transactions == 8
    assert summary.unique_customers == 4
    assert summary.largest_sale == Decimal("3200.00")
    assert summary.smallest_sale == Decimal("75.25")
    assert all(summary.smallest_sale <= s.amount <= summary.largest_sale for s in SALES)


def test_summarize_sales_average_times_count_matches_revenue():
    summary = agg.summarize_sales(SALES)
    rebuilt = summary.avg_sale_value * summary.total_transactions
    assert abs(rebuilt - summary.total_revenue) < Decimal("0.01")


def test_summarize_sales_empty_returns_none():
    assert agg.summarize_sales([]) is None


def test_build_recent_rows_resolves_names():
    lookup = {c.id: c for c in CUSTOMERS}
    rows = agg.build_recent_rows(agg.newest_first(SALES)[:2], lookup)
    assert [(r.customer_id, r.customer_name) for r in rows] == [
        (99, "Customer 99"), (1, "Acme Corp"),
    ]
