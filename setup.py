#!/usr/bin/env python3

""" Build script for the signed grid containers. """

import glob
import os
import shutil

from setuptools import Command as stCommand, setup


def iglob_all(*patterns):
    """ Yield each unique file path that matches one of many glob <patterns>. """
    seen = set()
    for pattern in patterns:
        for path in glob.iglob(pattern, recursive=True):
            if path not in seen:
                yield path
                seen.add(path)


class Command(stCommand):
    """ Command with default fields and methods defined. """
    user_options = []
    def initialize_options(self):
        pass
    def finalize_options(self):
        pass


class CommandNamespace:
    """ Contains all custom command classes for use in setuptools.setup().
        Any command here may be run by name, e.g. > python3 setup.py clean. """

    class clean(Command):
        description = "Remove all build and test-generated files."
        def run(self):
            for path in iglob_all('.pytest_cache', 'build', 'dist', '*.egg-info', '**/__pycache__'):
                if os.path.isdir(path):
                    shutil.rmtree(path)
                elif os.path.exists(path):
                    os.remove(path)

    class test(Command):
        description = "Run all unit tests."
        def run(self):
            import pytest
            raise SystemExit(pytest.main(["test"]))


setup(
    name="signed-grid",
    version="0.1.0",
    description="Sparse 1D and 2D containers addressed by signed integer coordinates.",
    packages=["signed_grid"],
    python_requires=">=3.7",
    extras_require={"test": ["pytest"]},
    cmdclass=dict(vars(CommandNamespace)),
)
