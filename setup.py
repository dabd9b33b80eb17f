import os
import shutil
import glob
import subprocess
import sys
from setuptools import setup, find_namespace_packages, Command


here = os.path.abspath(os.path.dirname(__file__))


class CleanCommand(Command):
    """Custom clean command to tidy up the project root."""
    CLEAN_FILES = './build ./dist ./*.pyc ./*.tgz ./*.egg-info ./*/__pycache__/ ./*/*/__pycache__/ .pytest_cache'.split(' ')

    user_options = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        global here

        for path_spec in self.CLEAN_FILES:
            # Make paths absolute and relative to this path
            abs_paths = glob.glob(os.path.normpath(os.path.join(
                here, path_spec)))
            for path in [str(p) for p in abs_paths]:
                if not path.startswith(here):
                    # Die if path in CLEAN_FILES is absolute
                    raise ValueError("%s is not a path inside %s" % (path,
                                                                     here))
                print('removing %s' % os.path.relpath(path))
                shutil.rmtree(path)


class TestCommand(Command):
    """A custom command to run tests using pytest."""

    description = 'run tests with pytest'
    user_options = [
        ('pytest-args=', 'a', 'Arguments to pass to pytest'),
    ]

    def initialize_options(self):
        """Set default values for options."""
        self.pytest_args = ''

    def finalize_options(self):
        """Post-process options."""
        pass

    def run(self):
        """Run command."""
        try:
            import pytest  # noqa: F401
        except ImportError:
            print("Error: pytest is not installed.")
            print("Install test dependencies with:")
            print("  pip install -e .[test]")
            sys.exit(1)

        command = [sys.executable, '-m', 'pytest']
        if self.pytest_args:
            command.extend(self.pytest_args.split())
        else:
            command.append('tests/')

        self.announce('Running command: %s' % ' '.join(command), level=2)
        errno = subprocess.call(command, cwd=here)
        sys.exit(errno)


setup(
    name='sourcegen-helpers',
    version='0.0.1',
    description='Helpers for generating object construction code',
    python_requires='>=3.8, <4',
    packages=find_namespace_packages(include=['sourcegen*']),
    extras_require={
        'test': ['pytest'],
    },
    cmdclass={
        'clean': CleanCommand,
        'test': TestCommand,
    },
)
