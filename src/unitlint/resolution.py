# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve directories and importable packages into compilation units.

A unit is the set of Python modules that live directly inside one directory:
primary modules, ``.pyi`` stubs, and test modules. Packages are located with
:class:`importlib.machinery.PathFinder` one segment at a time, so resolving a
specifier never executes package code.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Collection, Sequence
from dataclasses import dataclass
from importlib.machinery import ModuleSpec, PathFinder

from .constants import (
    CONFTEST_FILE,
    CURRENT_DIRECTORY,
    SOURCE_SUFFIX,
    STUB_SUFFIX,
    TEST_FILE_PREFIX,
    TEST_FILE_SUFFIX,
)
from .discovery.targets import has_recursive_marker, strip_recursive_marker
from .discovery.walker import expand_directory


class ResolutionError(Exception):
    """Raised when a directory or package cannot be resolved into a unit."""


class NoSourcesError(ResolutionError):
    """Raised when a directory holds no Python sources; callers skip it silently."""

    def __init__(self, directory: str) -> None:
        self.directory = directory
        super().__init__(f"no buildable Python source files in {directory}")


@dataclass(frozen=True, slots=True)
class PackageInfo:
    """Source files belonging to one directory or package.

    Attributes:
        directory: Directory holding the files; ``"."`` for the working directory.
        name: Package name, or the directory name for directory targets.
        source_files: Primary module file names.
        stub_files: ``.pyi`` stub file names.
        test_files: Test module file names.
    """

    directory: str
    name: str
    source_files: tuple[str, ...]
    stub_files: tuple[str, ...] = ()
    test_files: tuple[str, ...] = ()

    def files(self) -> list[str]:
        """Return every file of the unit qualified by :attr:`directory`.

        Returns:
            list[str]: Ordered unique paths; bare names when the unit lives in
            the current directory.
        """

        names = dict.fromkeys((*self.source_files, *self.stub_files, *self.test_files))
        if self.directory == CURRENT_DIRECTORY:
            return list(names)
        return [os.path.join(self.directory, name) for name in names]


def is_test_file(name: str) -> bool:
    """Return whether ``name`` follows the pytest module naming conventions."""

    if name == CONFTEST_FILE:
        return True
    if not name.endswith(SOURCE_SUFFIX):
        return False
    return name.startswith(TEST_FILE_PREFIX) or name.endswith(TEST_FILE_SUFFIX)


class PackageResolver:
    """Turn directories and package specifiers into :class:`PackageInfo` objects."""

    def __init__(self, *, excludes: Collection[str] = (), search_path: Sequence[str] | None = None) -> None:
        """Create a resolver.

        Args:
            excludes: Extra directory names pruned during recursive expansion.
            search_path: Locations searched after the base directory when
                resolving packages. Defaults to ``sys.path`` at lookup time.
        """

        self._excludes = frozenset(excludes)
        self._search_path = None if search_path is None else list(search_path)

    def resolve_dir(self, directory: str) -> PackageInfo:
        """Return the unit formed by the Python files directly inside ``directory``.

        Args:
            directory: Directory to inspect.

        Returns:
            PackageInfo: Categorised files of the directory.

        Raises:
            NoSourcesError: If the directory contains no Python files.
            ResolutionError: If the directory cannot be listed.
        """

        try:
            entries = sorted(os.listdir(directory))
        except FileNotFoundError as exc:
            raise ResolutionError(f"cannot find directory {directory}") from exc
        except NotADirectoryError as exc:
            raise ResolutionError(f"{directory} is not a directory") from exc
        except OSError as exc:
            raise ResolutionError(f"cannot read directory {directory}: {exc.strerror or exc}") from exc

        sources: list[str] = []
        stubs: list[str] = []
        tests: list[str] = []
        for name in entries:
            if name.startswith(".") or not os.path.isfile(os.path.join(directory, name)):
                continue
            if name.endswith(STUB_SUFFIX):
                stubs.append(name)
            elif is_test_file(name):
                tests.append(name)
            elif name.endswith(SOURCE_SUFFIX):
                sources.append(name)
        if not (sources or stubs or tests):
            raise NoSourcesError(directory)
        return PackageInfo(
            directory=directory,
            name=os.path.basename(os.path.abspath(directory)),
            source_files=tuple(sources),
            stub_files=tuple(stubs),
            test_files=tuple(tests),
        )

    def resolve_package(self, spec: str, base_dir: str = CURRENT_DIRECTORY) -> PackageInfo:
        """Return the unit for the importable package named by ``spec``.

        Args:
            spec: Dotted (``pkg.sub``) or slash (``pkg/sub``) package specifier.
            base_dir: Directory searched before the configured search path.

        Returns:
            PackageInfo: Files of the package directory, or a one-file unit
            when ``spec`` names a plain module.

        Raises:
            NoSourcesError: If the package has no Python files.
            ResolutionError: If the specifier is invalid or cannot be found.
        """

        dotted = normalize_specifier(spec)
        module_spec = self._find_spec(dotted, base_dir)
        locations = module_spec.submodule_search_locations
        if locations:
            info = self.resolve_dir(_display_path(next(iter(locations))))
            return PackageInfo(
                directory=info.directory,
                name=dotted,
                source_files=info.source_files,
                stub_files=info.stub_files,
                test_files=info.test_files,
            )
        origin = module_spec.origin
        if not origin or not origin.endswith((SOURCE_SUFFIX, STUB_SUFFIX)):
            raise NoSourcesError(origin or dotted)
        directory, filename = os.path.split(_display_path(origin))
        return PackageInfo(directory=directory or CURRENT_DIRECTORY, name=dotted, source_files=(filename,))

    def package_directory(self, spec: str, base_dir: str = CURRENT_DIRECTORY) -> str:
        """Return the directory of the package named by ``spec``.

        Raises:
            ResolutionError: If ``spec`` cannot be found or names a plain module.
        """

        dotted = normalize_specifier(spec)
        module_spec = self._find_spec(dotted, base_dir)
        if not module_spec.submodule_search_locations:
            raise ResolutionError(f"{dotted} is a module, not a package")
        return _display_path(next(iter(module_spec.submodule_search_locations)))

    def expand_package(self, spec: str, base_dir: str = CURRENT_DIRECTORY) -> list[str]:
        """Expand a ``pkg/...`` specifier into its buildable sub-packages.

        Specifiers without the recursive marker are returned unchanged.

        Args:
            spec: Package specifier, optionally carrying the ``/...`` marker.
            base_dir: Directory searched before the configured search path.

        Returns:
            list[str]: Dotted specifiers for the root package and every
            buildable sub-package whose path parts are valid identifiers.

        Raises:
            ResolutionError: If the root package of a recursive specifier
                cannot be located.
        """

        if not has_recursive_marker(spec):
            return [spec]
        root_spec = normalize_specifier(strip_recursive_marker(spec))
        root_dir = self.package_directory(root_spec, base_dir)
        expanded: list[str] = []
        for directory in expand_directory(root_dir, is_buildable=self.is_buildable, excludes=self._excludes):
            relative = os.path.relpath(directory, root_dir)
            parts = () if relative == CURRENT_DIRECTORY else tuple(relative.split(os.sep))
            if all(part.isidentifier() for part in parts):
                expanded.append(".".join((root_spec, *parts)))
        return expanded

    def expand_dir(self, directory: str) -> list[str]:
        """Return ``directory`` and its buildable sub-directories."""

        return expand_directory(directory, is_buildable=self.is_buildable, excludes=self._excludes)

    def is_buildable(self, directory: str) -> bool:
        """Return whether ``directory`` should be visited as a unit.

        Directories that fail for reasons other than missing sources count as
        buildable so the failure is reported when the unit is resolved.
        """

        try:
            self.resolve_dir(directory)
        except NoSourcesError:
            return False
        except ResolutionError:
            return True
        return True

    def _find_spec(self, dotted: str, base_dir: str) -> ModuleSpec:
        """Locate ``dotted`` segment by segment without importing parents.

        Raises:
            ResolutionError: If any segment is missing or a parent is a module.
        """

        PathFinder.invalidate_caches()
        search_path = sys.path if self._search_path is None else self._search_path
        locations: list[str] = [os.path.abspath(base_dir), *search_path]
        parts = dotted.split(".")
        module_spec: ModuleSpec | None = None
        for index in range(len(parts)):
            fullname = ".".join(parts[: index + 1])
            module_spec = PathFinder.find_spec(fullname, locations)
            if module_spec is None:
                raise ResolutionError(f"cannot find package {dotted!r} in {base_dir} or the module search path")
            if index < len(parts) - 1:
                if not module_spec.submodule_search_locations:
                    raise ResolutionError(f"cannot find package {dotted!r}: {fullname} is a module, not a package")
                locations = list(module_spec.submodule_search_locations)
        if module_spec is None:
            raise ResolutionError(f"invalid package specifier {dotted!r}")
        return module_spec


def normalize_specifier(spec: str) -> str:
    """Return the dotted form of a package specifier.

    Args:
        spec: Specifier using dots or forward slashes as separators.

    Returns:
        str: Dotted specifier.

    Raises:
        ResolutionError: If any segment is not a valid Python identifier.
    """

    dotted = spec.strip("/").replace("/", ".")
    parts = dotted.split(".")
    if not dotted or not all(part.isidentifier() for part in parts):
        raise ResolutionError(f"cannot find package {spec!r}: not a directory, file, or valid package name")
    return dotted


def _display_path(path: str) -> str:
    """Return ``path`` relative to the working directory when it lives beneath it."""

    absolute = os.path.abspath(path)
    cwd = os.getcwd()
    if absolute == cwd:
        return CURRENT_DIRECTORY
    if absolute.startswith(cwd + os.sep):
        return os.path.relpath(absolute, cwd)
    return absolute


__all__ = [
    "NoSourcesError",
    "PackageInfo",
    "PackageResolver",
    "ResolutionError",
    "is_test_file",
    "normalize_specifier",
]
