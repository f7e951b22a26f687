from statsboard.tabular import ParsedTable, parse_table


def test_headers_and_records_in_order():
    table = parse_table("K,A,B\nx,1,2\ny,3,4")

    assert table.headers == ["K", "A", "B"]
    assert table.key_column == "K"
    assert table.records == [
        {"K": "x", "A": "1", "B": "2"},
        {"K": "y", "A": "3", "B": "4"},
    ]
    assert list(table.records[0]) == ["K", "A", "B"]


def test_trailing_newline_adds_no_record():
    table = parse_table("K,A\nx,1\n\n")
    assert len(table.records) == 1


def test_cells_stay_strings():
    table = parse_table("K,A\n007,NA\n,1.50\n")
    assert table.records == [{"K": "007", "A": "NA"}, {"K": "", "A": "1.50"}]


def test_quoted_fields():
    table = parse_table('K,A\n"Smith, J",3\n')
    assert table.records == [{"K": "Smith, J", "A": "3"}]


def test_short_rows_are_padded():
    table = parse_table("K,A,B\nx,1\n")
    assert table.records == [{"K": "x", "A": "1", "B": ""}]


def test_empty_input():
    assert parse_table("") == ParsedTable()
    assert parse_table(None) == ParsedTable()
    assert parse_table("  \n\n") == ParsedTable()


def test_header_only():
    table = parse_table("K,A,B\n")
    assert table.headers == ["K", "A", "B"]
    assert table.records == []
    assert table.is_empty


def test_ragged_rows_degrade_to_empty_table():
    table = parse_table("K,A\nx,1\ny,1,2,3\n")
    assert table == ParsedTable()


def test_trailing_comma_keeps_key_column():
    table = parse_table("K,A\nx,1,\ny,2,\n")
    assert table.headers == ["K", "A"]
    assert table.records == [{"K": "x", "A": "1"}, {"K": "y", "A": "2"}]


def test_one_extra_field_per_row_is_dropped():
    table = parse_table("K,A\nx,1,2\ny,3,4\n")
    assert [r["K"] for r in table.records] == ["x", "y"]
    assert [r["A"] for r in table.records] == ["1", "3"]
