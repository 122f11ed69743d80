"""
Unit tests for the in-memory user directory
"""

import pytest

from userdir.directory import User, UserDirectory, UserFields, UserNotFound

pytestmark = pytest.mark.unit


class TestListUsers:
    """Tests for UserDirectory.list_users."""

    def test_fresh_directory_returns_seed_users_in_order(self, directory):
        users = directory.list_users()

        assert [u.id for u in users] == [1, 2, 3, 4]
        assert [u.login for u in users] == ["bleponge", "ctentatcule", "splankton", "secureuil"]

    def test_returns_snapshot_of_sequence(self, directory):
        users = directory.list_users()
        users.clear()

        assert len(directory.list_users()) == 4

    def test_empty_directory(self):
        assert UserDirectory().list_users() == []


class TestGetById:
    """Tests for UserDirectory.get_by_id."""

    def test_existing_user(self, directory):
        user = directory.get_by_id(3)

        assert user is not None
        assert user.login == "splankton"
        assert user.email == "sheldon.plankton@corp.com"

    def test_unknown_id_returns_none(self, directory):
        assert directory.get_by_id(99) is None


class TestCreate:
    """Tests for UserDirectory.create."""

    def test_assigns_next_sequential_id(self, directory):
        user = directory.create(UserFields(login="x"))

        assert user.id == 5
        assert user.login == "x"
        assert user.firstname is None
        assert user.lastname is None
        assert user.email is None

    def test_appends_to_end(self, directory):
        created = directory.create(UserFields(login="x"))

        users = directory.list_users()
        assert len(users) == 5
        assert users[-1] is created

    def test_consecutive_creates(self, directory):
        first = directory.create(UserFields(login="a"))
        second = directory.create(UserFields(login="b", email="b@corp.com"))

        assert (first.id, second.id) == (5, 6)
        assert directory.get_by_id(6).email == "b@corp.com"

    def test_no_uniqueness_on_login(self, directory):
        duplicate = directory.create(UserFields(login="bleponge"))

        assert duplicate.id == 5
        assert [u.login for u in directory.list_users()].count("bleponge") == 2

    def test_id_follows_length_not_max_id(self):
        """A directory with an id gap hands out a colliding id."""
        sparse = UserDirectory([User(id=1, login="a"), User(id=3, login="c")])

        created = sparse.create(UserFields(login="new"))

        assert created.id == 3
        assert [u.id for u in sparse.list_users()] == [1, 3, 3]


class TestUpdate:
    """Tests for UserDirectory.update."""

    def test_full_replace(self, directory):
        result = directory.update(2, UserFields(login="y", firstname="z"))

        assert isinstance(result, User)
        assert result.id == 2
        assert result.login == "y"
        assert result.firstname == "z"
        assert result.lastname is None
        assert result.email is None

    def test_mutates_record_in_place(self, directory):
        before = directory.get_by_id(1)

        after = directory.update(1, UserFields(login="bob", email="bob@corp.com"))

        assert after is before
        assert directory.list_users()[0].login == "bob"
        assert len(directory) == 4

    def test_unknown_id_returns_not_found(self, directory):
        result = directory.update(999, UserFields(login="y"))

        assert isinstance(result, UserNotFound)
        assert result.user_id == 999
        assert "999" in result.message
        assert result.message == "user with the id 999 not found!"

    def test_unknown_id_leaves_directory_untouched(self, directory):
        directory.update(999, UserFields(login="y"))

        assert [u.login for u in directory.list_users()] == [
            "bleponge",
            "ctentatcule",
            "splankton",
            "secureuil",
        ]

    def test_creates_after_update_continue_sequence(self, directory):
        directory.update(1, UserFields(login="renamed"))

        first = directory.create(UserFields(login="a"))
        second = directory.create(UserFields(login="b"))

        assert (first.id, second.id) == (5, 6)
