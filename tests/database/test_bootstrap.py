from employee_api.database.bootstrap import SQL_DIR, _strip_create_db_and_use, iter_sql_statements


def test_split_ignores_semicolons_inside_quotes():
    sql = "INSERT INTO t VALUES ('a;b'); SELECT \"x;y\";\nSELECT 1"

    assert list(iter_sql_statements(sql)) == [
        "INSERT INTO t VALUES ('a;b')",
        'SELECT "x;y"',
        "SELECT 1",
    ]


def test_split_handles_escaped_quote():
    sql = "INSERT INTO t VALUES ('it\\'s; fine');"

    assert list(iter_sql_statements(sql)) == ["INSERT INTO t VALUES ('it\\'s; fine')"]


def test_split_skips_empty_statements():
    assert list(iter_sql_statements(";;  ;\n")) == []


def test_strip_create_database_and_use():
    sql = "CREATE DATABASE IF NOT EXISTS employee_db;\nUSE employee_db;\nCREATE TABLE employees (id INT);"

    stripped = _strip_create_db_and_use(sql)

    assert list(iter_sql_statements(stripped)) == ["CREATE TABLE employees (id INT)"]


def test_sql_scripts_ship_inside_the_package():
    schema = (SQL_DIR / "schema.sql").read_text(encoding="utf-8")

    assert SQL_DIR.parent.name == "database"
    assert "CREATE TABLE IF NOT EXISTS employees" in schema
    assert (SQL_DIR / "seed.sql").is_file()
