import setuptools
import os

own_dir = os.path.abspath(os.path.dirname(__file__))


def requirements(path='requirements.txt'):
    with open(os.path.join(own_dir, path)) as f:
        for line in f.readlines():
            line = line.strip()
            if not line or line.startswith('#'):
                continue
            yield line


def modules():
    return [
        'gitutil',
        'makoutil',
    ]


def packages():
    return [
        'ci',
        'release_notes',
    ]


def version():
    with open(os.path.join(own_dir, 'VERSION')) as f:
        return f.read().strip()


setuptools.setup(
    name='release-notes-tool',
    version=version(),
    description='Release Notes Generator (git-history, contributors and dependency-changes)',
    python_requires='>=3.11',
    py_modules=modules(),
    packages=packages(),
    package_data={
        'release_notes':['resources/*.mako'],
    },
    install_requires=list(requirements()),
    extras_require={
        'test': list(requirements('requirements.test.txt')),
    },
    entry_points={
        'console_scripts': [
            'release-notes = release_notes.cli:release_notes_cli',
        ],
    },
)
