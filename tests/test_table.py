from __future__ import annotations

from dxfcriber.models import Column, LabelPoint
from dxfcriber.table import build_table, group_rows, ordered_row_keys, project_row

from conftest import make_points

AUTO = [Column("x=10", 10.0, 10.0), Column("x=20", 20.0, 20.0)]


def test_end_to_end_auto_columns(sample_points) -> None:
    table = build_table(sample_points, AUTO)

    assert table.header == ("filename", "y", "x=10", "x=20")
    assert table.rows == (
        ("f.dxf", "8", "C", ""),
        ("f.dxf", "5", "A", "B"),
    )
    assert table.column_names == ("x=10", "x=20")


def test_end_to_end_explicit_column_drops_empty_row(sample_points) -> None:
    table = build_table(sample_points, [Column("Qty", 15.0, 25.0)])

    assert table.header == ("filename", "y", "Qty")
    assert table.rows == (("f.dxf", "5", "B"),)


def test_no_columns_yields_header_only(sample_points) -> None:
    table = build_table(sample_points, [])

    assert table.header == ("filename", "y")
    assert table.rows == ()
    assert len(table) == 0


def test_rows_sorted_by_file_then_y_descending() -> None:
    points = (
        make_points("b.dxf", [(1, 3, "b3"), (1, 9, "b9")])
        + make_points("a.dxf", [(1, -2, "a-2"), (1, 7, "a7"), (1, 0.5, "a0.5")])
    )

    table = build_table(points, [Column("v", 0.0, 2.0)])

    assert [row[:2] for row in table.rows] == [
        ("a.dxf", "7"),
        ("a.dxf", "0.5"),
        ("a.dxf", "-2"),
        ("b.dxf", "9"),
        ("b.dxf", "3"),
    ]


def test_overlapping_columns_value_only_under_first_listed() -> None:
    points = make_points("f.dxf", [(50, 1, "mid")])
    columns = [Column("wide", 0.0, 100.0), Column("narrow", 40.0, 60.0)]

    assert build_table(points, columns).rows == (("f.dxf", "1", "mid", ""),)
    assert build_table(points, columns[::-1]).rows == (("f.dxf", "1", "mid", ""),)


def test_overlap_leaves_other_entries_for_later_columns() -> None:
    points = make_points("f.dxf", [(50, 1, "mid"), (90, 1, "right")])
    columns = [Column("narrow", 40.0, 60.0), Column("wide", 0.0, 100.0)]

    assert build_table(points, columns).rows == (("f.dxf", "1", "mid", "right"),)


def test_same_x_in_row_last_write_wins() -> None:
    points = make_points("f.dxf", [(10, 1, "first"), (10, 1, "second")])

    buckets = group_rows(points)

    assert buckets == {("f.dxf", 1.0): {10.0: "second"}}


def test_project_row_uses_bucket_insertion_order() -> None:
    bucket = {30.0: "late", 12.0: "early", 30.5: "other"}

    assert project_row(bucket, [Column("range", 10.0, 31.0)]) == ["late"]
    assert project_row(bucket, [Column("none", 40.0, 50.0)]) == [""]


def test_rows_with_only_empty_text_are_dropped() -> None:
    points = make_points("f.dxf", [(10, 1, ""), (10, 2, "kept")])

    table = build_table(points, [Column("v", 10.0, 10.0)])

    assert table.rows == (("f.dxf", "2", "kept"),)


def test_ordered_row_keys_distinguish_files_with_same_y() -> None:
    buckets = group_rows(
        [LabelPoint("b.dxf", 0.0, 1.0, "x"), LabelPoint("a.dxf", 0.0, 1.0, "y")]
    )

    assert ordered_row_keys(buckets) == [("a.dxf", 1.0), ("b.dxf", 1.0)]
