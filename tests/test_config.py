import pytest

from minigit.config import (
    TEST_USER_MAIL,
    TEST_USER_NAME,
    RepoConfig,
    config_command,
)
from minigit.errors import (
    FormatError,
    IncorrectOptionAmount,
    RepositoryError,
    UnknownOption,
)


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "config"
    path.write_text("")
    return path


def test_open_missing_file(tmp_path):
    with pytest.raises(RepositoryError):
        RepoConfig.open(tmp_path / "nope")


def test_open_empty_has_no_user(config_path):
    config = RepoConfig.open(config_path)
    assert config.get_user() is None


def test_open_reads_values(config_path):
    config_path.write_text("user_name: theo\nuser_mail: theo@example.com\n")
    config = RepoConfig.open(config_path)
    assert config.get_user() == ("theo", "theo@example.com")


def test_open_invalid_category(config_path):
    config_path.write_text("colour: blue\n")
    with pytest.raises(FormatError):
        RepoConfig.open(config_path)


def test_user_needs_both_fields(config_path):
    config = RepoConfig.open(config_path)
    config.user_name = "theo"
    assert config.get_user() is None


def test_save_round_trip(config_path):
    config = RepoConfig.open(config_path)
    config.user_name = "ana maria"
    config.user_mail = "ana@example.com"
    config.save()
    reopened = RepoConfig.open(config_path)
    assert reopened.get_user() == ("ana maria", "ana@example.com")
    assert config_path.read_text().splitlines()[0] == "user_name: ana maria"


def test_config_command_sets_user(config_path):
    result = config_command(
        config_path,
        ["--user-name", "theo", "--user-mail", "theo@example.com"],
    )
    assert result == "Set user name theo. Set user mail theo@example.com."
    assert RepoConfig.open(config_path).get_user() == ("theo", "theo@example.com")


def test_config_command_skips_empty_args(config_path):
    result = config_command(config_path, ["", "--user-name", "", "theo"])
    assert result == "Set user name theo."
    assert RepoConfig.open(config_path).user_name == "theo"


def test_config_command_no_args(config_path):
    with pytest.raises(IncorrectOptionAmount):
        config_command(config_path, [])


def test_config_command_unknown_option(config_path):
    with pytest.raises(UnknownOption):
        config_command(config_path, ["--colour", "blue"])


def test_config_command_test_user(config_path):
    result = config_command(config_path, ["--test", "--user-name", "other"])
    assert result == ""
    assert RepoConfig.open(config_path).get_user() == (TEST_USER_NAME, TEST_USER_MAIL)


def test_config_command_missing_config(tmp_path):
    with pytest.raises(RepositoryError):
        config_command(tmp_path / "missing", ["--user-name", "theo"])