"""
Build script for the importorder package.
"""

# std
import shutil
from pathlib import Path

# third-party
from setuptools import Command, find_packages, setup


# Setuptools
# ---------------------------------------------------------------------------- #

class CleanCommand(Command):
    """Remove build artifacts and caches from the project tree."""

    description = 'remove build artifacts and caches'
    user_options = [('list-only', 'l', 'list the paths without removing them')]
    boolean_options = ['list-only']

    patterns = ('build', 'dist', 'src/*.egg-info', '.pytest_cache',
                '**/__pycache__')

    def initialize_options(self):
        self.list_only = False

    def finalize_options(self):
        self.list_only = bool(self.list_only)

    def run(self):
        root = Path(__file__).parent
        for pattern in self.patterns:
            for path in sorted(root.glob(pattern)):
                self.announce(f'removing {path.relative_to(root)}', level=2)
                if not self.list_only:
                    shutil.rmtree(path, ignore_errors=True)


# Main
# ---------------------------------------------------------------------------- #

setup(
    name='importorder',
    version='0.1.0',
    description='Order groups of import statements with blank-line separators.',
    python_requires='>=3.8',
    package_dir={'': 'src'},
    packages=find_packages('src', exclude=['tests', 'tests.*']),
    include_package_data=True,
    package_data={'importorder': ['config.yaml']},
    install_requires=[
        'click',
        'loguru',
        'platformdirs',
        'pyyaml',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['importorder = importorder.cli:main'],
    },
    cmdclass={'clean': CleanCommand}
)
