# tests/test_config.py
"""
End to end: options in, flattened and parsed MySQL config out.
"""

import configparser
import logging

import pytest

from pymycnf import (
    IncludeDepthError,
    InvalidArgument,
    MySQLConfig,
    ReadError,
    load_options,
    read_config,
)
from pymycnf.ini import IniClass


# =====================================================
# Argument validation
# =====================================================

@pytest.mark.parametrize(
    "options, message",
    [
        (None, "Arguments must be given as a mapping"),
        (["my.cnf"], "Arguments must be given as a mapping"),
        ({}, "Missing required argument 'from'"),
        ({"from": ""}, "Empty argument 'from'"),
        ({"from": None}, "Empty argument 'from'"),
        ({"from": 42}, "Argument 'from' must be a path"),
        ({"from": "my.cnf", "form": "typo"}, "Unknown argument"),
        ({"from": "my.cnf", "max_depth": -1}, "max_depth"),
        ({"from": "my.cnf", "encoding": "bogus"}, "Unknown encoding 'bogus'"),
        ({"from": "my.cnf", "encoding": 42}, "Argument 'encoding' must be a str"),
        ({"from": "my.cnf", "base_dir": 42}, "Argument 'base_dir' must be a path"),
    ],
)
def test_invalid_arguments(options, message):
    with pytest.raises(InvalidArgument, match=message):
        read_config(options)


def test_no_arguments_at_all():
    with pytest.raises(InvalidArgument, match="must be given as a mapping"):
        read_config()


def test_validation_happens_before_io(tmp_path):
    # the file doesn't exist, but the bad backend is reported first
    with pytest.raises(InvalidArgument, match="Unknown backend"):
        read_config({"from": str(tmp_path / "absent.cnf"), "using": "nope"})


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        read_config({})


# =====================================================
# Reading
# =====================================================

def test_bare_debug_in_global_section(cnf_tree):
    root = cnf_tree({"my.cnf": "debug\n"})

    config = read_config({"from": str(root / "my.cnf")})

    assert config.text == "debug = yes\n"
    assert config.header["debug"] == "yes"
    assert config.native.get_value(None, "debug") == "yes"


@pytest.mark.parametrize("using", ["ini", "configparser", "iniconfig"])
def test_include_with_every_backend(cnf_tree, using):
    root = cnf_tree({
        "my.cnf": "[main]\n!include parts/extra.cnf\n",
        "parts/extra.cnf": "foo = bar\n",
    })

    config = read_config({"from": str(root / "my.cnf"), "using": using})

    assert config.text == "[main]\nfoo = bar\n"
    assert config["main"]["foo"] == "bar"
    assert config.backend == using


def test_result_carries_provenance(cnf_tree):
    root = cnf_tree({"my.cnf": "[mysqld]\nport = 3306\n"})

    config = MySQLConfig.from_options({"from": str(root / "my.cnf")})

    assert isinstance(config.native, IniClass)
    assert config.source == str(root / "my.cnf")
    assert config.backend == "ini"
    assert "mysqld" in config
    assert list(config) == ["mysqld"]
    assert repr(config) == f"<MySQLConfig {str(root / 'my.cnf')!r} using 'ini'>"


def test_attribute_lookups_are_delegated(cnf_tree):
    root = cnf_tree({"my.cnf": "[mysqld]\nport = 3306\nlog_bin\n"})

    config = read_config({"from": str(root / "my.cnf"),
                          "using": "configparser"})

    assert isinstance(config.native, configparser.ConfigParser)
    assert config.sections() == ["mysqld"]
    assert config.getint("mysqld", "port") == 3306
    assert config.getboolean("mysqld", "log_bin") is True
    with pytest.raises(AttributeError):
        config._private


def test_relative_from_with_base_dir(cnf_tree):
    root = cnf_tree({"etc/mysql/my.cnf": "[client]\nport = 3306\n"})

    config = read_config({"from": "etc/mysql/my.cnf", "base_dir": str(root)})

    assert config["client"]["port"] == "3306"


def test_full_mysql_layout(cnf_tree):
    root = cnf_tree({
        "my.cnf": (
            "[client]\n"
            "port = 3306\n"
            "\n"
            "[mysqld]\n"
            "skip-external-locking\n"
            "!includedir conf.d/\n"
            "!includedir mysql.conf.d/\n"
        ),
        "conf.d/mysqld_safe_syslog.cnf": "[mysqld_safe]\nsyslog\n",
        "conf.d/.swp": "broken line\n",
    })

    config = read_config({"from": str(root / "my.cnf")})

    assert config["mysqld"]["skip-external-locking"] == "yes"
    assert config["mysqld_safe"]["syslog"] == "yes"
    assert config["client"]["port"] == "3306"


def test_bom_before_first_section(tmp_path):
    (tmp_path / "my.ini").write_text(
        "\ufeff[mysqld]\nport = 3306\n", encoding="utf-8")

    config = read_config({"from": str(tmp_path / "my.ini")})

    assert config["mysqld"]["port"] == "3306"
    assert len(config.header) == 0


def test_missing_root_is_read_error(tmp_path):
    with pytest.raises(ReadError) as exc:
        read_config({"from": str(tmp_path / "absent.cnf")})

    assert exc.value.path == str(tmp_path / "absent.cnf")


def test_depth_limit_option(cnf_tree):
    root = cnf_tree({"loop.cnf": "!include loop.cnf\n"})

    with pytest.raises(IncludeDepthError):
        read_config({"from": str(root / "loop.cnf"), "max_depth": 3})


def test_backend_errors_are_not_wrapped(cnf_tree):
    root = cnf_tree({"my.cnf": "debug\n"})

    with pytest.raises(configparser.MissingSectionHeaderError):
        read_config({"from": str(root / "my.cnf"), "using": "configparser"})


def test_loading_is_logged(cnf_tree, caplog):
    caplog.set_level(logging.INFO, logger="pymycnf")
    root = cnf_tree({"my.cnf": "[x]\n"})

    read_config({"from": str(root / "my.cnf")})

    assert "with backend ini" in caplog.text


# =====================================================
# YAML options
# =====================================================

def test_load_options_relative_to_yaml_file(cnf_tree):
    root = cnf_tree({
        "opts/pymycnf.yaml": "from: ../my.cnf\nusing: configparser\n",
        "my.cnf": "[mysqld]\nport = 3306\n",
    })

    options = load_options(root / "opts" / "pymycnf.yaml")
    config = read_config(options)

    assert options["base_dir"] == str(root / "opts")
    assert config.backend == "configparser"
    assert config["mysqld"]["port"] == "3306"


def test_load_options_keeps_explicit_base_dir(cnf_tree, tmp_path):
    root = cnf_tree({"o.yaml": f"from: my.cnf\nbase_dir: {tmp_path}/x\n"})

    assert load_options(root / "o.yaml")["base_dir"] == f"{tmp_path}/x"


def test_empty_options_file_misses_from(cnf_tree):
    root = cnf_tree({"o.yaml": ""})

    options = load_options(root / "o.yaml")

    assert options == {}
    with pytest.raises(InvalidArgument, match="Missing required argument"):
        read_config(options)


def test_options_file_must_be_a_mapping(cnf_tree):
    root = cnf_tree({"o.yaml": "- my.cnf\n"})

    with pytest.raises(InvalidArgument, match="must be a mapping, got list"):
        load_options(root / "o.yaml")


def test_missing_options_file(tmp_path):
    with pytest.raises(ReadError):
        load_options(tmp_path / "absent.yaml")
