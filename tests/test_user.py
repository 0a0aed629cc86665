import os
from types import SimpleNamespace
from unittest import mock

from slstatus.components.user import gid, uid, username


def test_gid_matches_process():
    assert gid() == str(os.getgid())


def test_uid_is_effective_uid():
    with mock.patch("os.geteuid", return_value=4242):
        assert uid() == "4242"


def test_username_from_password_database():
    entry = SimpleNamespace(pw_name="alice")
    with mock.patch("os.geteuid", return_value=4242), mock.patch(
        "pwd.getpwuid", return_value=entry
    ) as getpwuid:
        assert username() == "alice"
    getpwuid.assert_called_once_with(4242)


def test_unknown_user_gives_none(capsys):
    with mock.patch("pwd.getpwuid", side_effect=KeyError("no such user")):
        assert username() is None
    assert "getpwuid" in capsys.readouterr().err