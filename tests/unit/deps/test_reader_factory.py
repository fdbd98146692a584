# tests/unit/deps/test_reader_factory.py — v1
"""Tests for deps/reader_factory.py."""

from __future__ import annotations

import pytest

from rebuildcheck.config.settings import Settings
from rebuildcheck.core.models import Toolchain
from rebuildcheck.deps.json_reader import JsonDependencyReader
from rebuildcheck.deps.makefile_reader import MakefileDependencyReader
from rebuildcheck.deps.reader_factory import (
    UnsupportedToolchainError,
    create_dependency_reader,
    get_dependencies,
    register_dependency_reader,
    supported_toolchains,
)


class TestCreateDependencyReader:
    def test_msvc(self):
        assert isinstance(create_dependency_reader(Toolchain.MSVC), JsonDependencyReader)

    def test_gnu(self):
        assert isinstance(create_dependency_reader(Toolchain.GNU), MakefileDependencyReader)

    def test_string_name(self):
        assert isinstance(create_dependency_reader("msvc"), JsonDependencyReader)
        assert isinstance(create_dependency_reader("GNU"), MakefileDependencyReader)

    def test_unsupported(self):
        with pytest.raises(UnsupportedToolchainError, match="Supported: gnu, msvc"):
            create_dependency_reader("borland")

    def test_unsupported_is_value_error(self):
        with pytest.raises(ValueError):
            create_dependency_reader("")

    def test_settings_extensions(self):
        s = Settings(_env_file=None, msvc_deps_extension="srcdeps", gnu_deps_extension="d")
        assert create_dependency_reader("msvc", s).extension == "srcdeps"
        assert create_dependency_reader("gnu", s).extension == "d"

    def test_settings_empty_policy(self, unit):
        s = Settings(_env_file=None, empty_deps_is_unknown=False)
        unit.dst.with_suffix(".dep").write_text("main.o:", encoding="utf-8")
        assert create_dependency_reader("gnu", s).read(unit) == []


class TestGetDependencies:
    def test_gnu(self, unit):
        unit.dst.with_suffix(".dep").write_text("main.o: main.c a.h", encoding="utf-8")
        assert get_dependencies(unit, Toolchain.GNU) == ["main.c", "a.h"]

    def test_formats_are_independent(self, unit):
        unit.dst.with_suffix(".dep").write_text("main.o: main.c", encoding="utf-8")
        assert get_dependencies(unit, Toolchain.MSVC) is None


class TestRegistry:
    def test_supported(self):
        assert supported_toolchains() == ["gnu", "msvc"]

    def test_register_override(self, unit):
        class FixedReader(MakefileDependencyReader):
            def read(self, unit):
                return ["fixed.h"]

        try:
            register_dependency_reader(Toolchain.GNU, FixedReader)
            assert get_dependencies(unit, "gnu") == ["fixed.h"]
        finally:
            register_dependency_reader(Toolchain.GNU, MakefileDependencyReader)
