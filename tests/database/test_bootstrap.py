from shopdesk.database.bootstrap import _strip_create_db_and_use, iter_sql_statements


def test_splits_on_semicolons_outside_quotes():
    sql = "INSERT INTO t VALUES ('a;b'); INSERT INTO t VALUES (\"c;d\");\nSELECT 1"

    assert list(iter_sql_statements(sql)) == [
        "INSERT INTO t VALUES ('a;b')",
        'INSERT INTO t VALUES ("c;d")',
        "SELECT 1",
    ]


def test_skips_comment_lines_and_blank_statements():
    sql = "-- header; with semicolon\nCREATE TABLE x (id INT);\n;\n"

    assert list(iter_sql_statements(sql)) == ["CREATE TABLE x (id INT)"]


def test_escaped_quote_does_not_end_string():
    sql = "INSERT INTO t VALUES ('it\\'s; fine');"

    assert list(iter_sql_statements(sql)) == ["INSERT INTO t VALUES ('it\\'s; fine')"]


def test_strips_create_database_and_use():
    sql = "CREATE DATABASE IF NOT EXISTS shopdesk;\nUSE shopdesk;\nCREATE TABLE a (id INT);"

    assert list(iter_sql_statements(_strip_create_db_and_use(sql))) == ["CREATE TABLE a (id INT)"]
