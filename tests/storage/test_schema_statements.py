from payroll_portal.database.bootstrap import SCHEMA_PATH, split_statements


def test_split_statements_ignores_comments_and_quoted_semicolons():
    sql = """
    -- header; with a semicolon
    CREATE TABLE a (x VARCHAR(10) DEFAULT 'a;b');
    INSERT INTO a VALUES ('c');
    """
    assert list(split_statements(sql)) == [
        "CREATE TABLE a (x VARCHAR(10) DEFAULT 'a;b')",
        "INSERT INTO a VALUES ('c')",
    ]


def test_bundled_schema_creates_both_tables():
    statements = list(split_statements(SCHEMA_PATH.read_text(encoding="utf-8")))

    assert len(statements) == 2
    assert "partitions" in statements[0]
    assert "partition_rows" in statements[1]
