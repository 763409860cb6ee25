"""Tests for building MySQL connection configuration from the environment."""

import pytest

from mysqlcfg.connection import pool as pool_module
from mysqlcfg.connection.mysql_config import (
    DEFAULT_MYSQL_HOST,
    DEFAULT_MYSQL_PORT,
    MissingCredentialError,
    MySQLConfig,
)


def _env(username="alice", password="secret"):
    environ = {}
    if username is not None:
        environ["MYSQL_USERNAME"] = username
    if password is not None:
        environ["MYSQL_PASSWORD"] = password
    return environ


def test_from_env_reads_credentials_and_applies_defaults():
    config = MySQLConfig.from_env(_env())

    assert config.username == "alice"
    assert config.password == "secret"
    assert config.host == DEFAULT_MYSQL_HOST == "localhost"
    assert config.port == DEFAULT_MYSQL_PORT == "33060"
    assert config.logging is False


@pytest.mark.parametrize(
    "username, password, variable",
    [
        (None, "secret", "MYSQL_USERNAME"),
        ("", "secret", "MYSQL_USERNAME"),
        ("alice", None, "MYSQL_PASSWORD"),
        ("alice", "", "MYSQL_PASSWORD"),
        (None, None, "MYSQL_USERNAME"),
    ],
)
def test_from_env_missing_credentials(username, password, variable):
    with pytest.raises(MissingCredentialError) as excinfo:
        MySQLConfig.from_env(_env(username, password))

    assert excinfo.value.variable == variable
    assert variable in str(excinfo.value)
    assert isinstance(excinfo.value, ValueError)


def test_from_env_reads_process_environment(monkeypatch):
    monkeypatch.setenv("MYSQL_USERNAME", "svc")
    monkeypatch.setenv("MYSQL_PASSWORD", "pw")

    config = MySQLConfig.from_env()

    assert (config.username, config.password) == ("svc", "pw")


def test_from_env_ignores_host_and_port_variables():
    environ = _env()
    environ.update({"MYSQL_HOST": "db.example.com", "MYSQL_PORT": "3306"})

    config = MySQLConfig.from_env(environ)

    assert config.host == "localhost"
    assert config.port == "33060"


def test_explicit_host_and_port_override_defaults():
    config = MySQLConfig.from_env(_env(), host="db.internal", port="3306")

    assert config.host == "db.internal"
    assert config.port == "3306"


@pytest.mark.parametrize("host, port", [("", ""), (None, None)])
def test_blank_host_and_port_fall_back_to_defaults(host, port):
    config = MySQLConfig.from_env(_env(), host=host, port=port)

    assert config.host == "localhost"
    assert config.port == "33060"


def test_direct_construction_never_leaves_host_or_port_blank():
    config = MySQLConfig(username="alice", password="secret", host="", port="")

    assert config.host == "localhost"
    assert config.port == "33060"


def test_credentials_are_immutable():
    config = MySQLConfig.from_env(_env())

    with pytest.raises(AttributeError):
        config.username = "mallory"  # type: ignore[misc]
    with pytest.raises(AttributeError):
        config.password = "hunter2"  # type: ignore[misc]


def test_repr_hides_password():
    config = MySQLConfig.from_env(_env(password="s3cr3t-value"))

    assert "s3cr3t-value" not in repr(config)
    assert "alice" in repr(config)


def test_dsn_example():
    config = MySQLConfig.from_env(_env())

    assert config.dsn("shop") == "alice:secret@tcp(localhost:33060/shop)"


def test_dsn_server_level_differs_only_in_database_segment():
    config = MySQLConfig.from_env(_env())

    server_level = config.dsn("")
    with_database = config.dsn("mydb")

    assert server_level == "alice:secret@tcp(localhost:33060/)"
    assert with_database == server_level[:-1] + "mydb)"
    assert config.dsn() == server_level


def test_dsn_is_pure():
    config = MySQLConfig.from_env(_env())

    assert config.dsn("shop") == config.dsn("shop")
    assert config.dsn("shop", mask_password=True) == config.dsn("shop", mask_password=True)


def test_dsn_passes_special_characters_through():
    config = MySQLConfig.from_env(_env(password="p@ss:w/rd"))

    assert config.dsn("db") == "alice:p@ss:w/rd@tcp(localhost:33060/db)"


def test_dsn_masks_password_on_request():
    config = MySQLConfig.from_env(_env())

    masked = config.dsn("shop", mask_password=True)

    assert masked == "alice:***@tcp(localhost:33060/shop)"
    assert "secret" not in masked


def test_auth_returns_credential_segment():
    config = MySQLConfig.from_env(_env())

    assert config.auth() == "alice:secret"
    assert config.dsn("x").startswith(config.auth() + "@")


def test_url_carries_descriptor_fields():
    config = MySQLConfig.from_env(_env(password="p@ss"), host="db.internal", port="3306")

    url = config.url("shop")

    assert url.drivername == "mysql+mysqlconnector"
    assert url.username == "alice"
    assert url.password == "p@ss"
    assert url.host == "db.internal"
    assert url.port == 3306
    assert url.database == "shop"


def test_url_without_database_is_server_level():
    config = MySQLConfig.from_env(_env())

    assert config.url("").database is None


def test_url_rejects_non_numeric_port():
    config = MySQLConfig.from_env(_env(), port="not-a-port")

    with pytest.raises(ValueError):
        config.url("shop")


@pytest.mark.parametrize(
    "username, password, variable",
    [
        ("", "secret", "MYSQL_USERNAME"),
        ("alice", "", "MYSQL_PASSWORD"),
        ("", "", "MYSQL_USERNAME"),
    ],
)
def test_direct_construction_requires_credentials(username, password, variable):
    with pytest.raises(MissingCredentialError) as excinfo:
        MySQLConfig(username=username, password=password)

    assert excinfo.value.variable == variable


def test_open_with_non_numeric_port_fails_before_driver(monkeypatch):
    def unexpected_create_engine(url, **kwargs):
        raise AssertionError("create_engine should not be reached")

    monkeypatch.setattr(pool_module, "create_engine", unexpected_create_engine)
    config = MySQLConfig.from_env(_env(), port="not-a-port")

    with pytest.raises(ValueError):
        config.open("shop")
