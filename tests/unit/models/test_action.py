"""Unit tests for action models."""

import pytest
from japm.models.action import Action, ActionType, create_install_action, create_remove_action

from tests.helpers import make_local, make_remote


class TestAction:
    """Tests for Action."""

    def test_install_properties(self) -> None:
        """Install actions expose their package name and type."""
        action = create_install_action(make_remote("hello"))

        assert action.action_type == ActionType.INSTALL
        assert action.is_install
        assert not action.is_remove
        assert action.name == "hello"
        assert str(action) == "Install hello@1.0.0"

    def test_remove_properties(self) -> None:
        """Remove actions expose their package name and type."""
        action = create_remove_action(make_local("hello"))

        assert action.is_remove
        assert str(action) == "Remove hello@1.0.0"

    def test_equality_ignores_scripts_and_files(self) -> None:
        """Equality uses type, identity and dependencies only."""
        built = make_remote("hello", install=["make"])
        built.package_files = ["/usr/bin/hello"]

        assert create_install_action(built) == create_install_action(make_remote("hello"))
        assert hash(create_install_action(built)) == hash(create_install_action(make_remote("hello")))

    def test_dependencies_take_part_in_equality(self) -> None:
        """Different dependency lists make different actions."""
        assert create_install_action(make_remote("a", dependencies=["b"])) != create_install_action(
            make_remote("a")
        )

    def test_type_takes_part_in_equality(self) -> None:
        """Install and Remove of the same package differ."""
        assert create_install_action(make_remote("a")) != create_remove_action(make_local("a"))

    def test_hash_survives_build(self) -> None:
        """Filling package_files does not change the hash."""
        package = make_remote("hello")
        action = create_install_action(package)
        before = hash(action)

        package.package_files = ["/usr/bin/hello"]

        assert hash(action) == before

    def test_package_kind_is_checked(self) -> None:
        """Install needs a RemotePackage and Remove a LocalPackage."""
        with pytest.raises(TypeError):
            Action(action_type=ActionType.INSTALL, package=make_local("a"))
        with pytest.raises(TypeError):
            Action(action_type=ActionType.REMOVE, package=make_remote("a"))
