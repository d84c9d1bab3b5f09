import json

from sqlalchemy import create_engine, inspect

from storefront.tools.init_db import main


def test_init_db_creates_tables(tmp_path, capsys):
    url = f"sqlite:///{(tmp_path / 'tool.db').as_posix()}"

    assert main(["--database-url", url]) == 0
    out = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert {"user", "store", "product"} <= set(out["tables"])
    assert out["dropped"] is False

    engine = create_engine(url)
    try:
        names = set(inspect(engine).get_table_names())
    finally:
        engine.dispose()
    assert {"user", "store", "product"} <= names

    assert main(["--database-url", url, "--drop"]) == 0
    assert json.loads(capsys.readouterr().out.strip().splitlines()[-1])["dropped"] is True
